import customtkinter as ctk

from services.report_service import RecentRow
from ui.components.expense_chart import ExpenseChart
from utils.constants import INCOME_COLOR, EXPENSE_COLOR
from utils.currency import format_currency

ALL_MONTHS = "All months"


class DashboardTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        on_delete,         # callable(tx_id)
        on_month_change,   # callable(month: str)
        on_export,         # callable()
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_delete = on_delete
        self._on_month_change = on_month_change
        self._on_export = on_export
        self._month_var = ctk.StringVar(value=ALL_MONTHS)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_summary_cards()
        self._build_bottom_section()

    def _build_summary_cards(self):
        frame = ctk.CTkFrame(self, fg_color="transparent")
        frame.grid(row=0, column=0, sticky="ew", padx=16, pady=12)
        frame.grid_columnconfigure((0, 1, 2), weight=1)
        self._card_values = {}
        for col, (key, label) in enumerate(
            [("income", "Total Income"), ("expense", "Total Expenses"), ("balance", "Balance")]
        ):
            card = ctk.CTkFrame(frame, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=col, padx=6, sticky="ew")
            card.grid_columnconfigure(0, weight=1)
            ctk.CTkLabel(
                card, text=label, font=ctk.CTkFont(size=12), text_color="gray60",
            ).grid(row=0, column=0, pady=(12, 0), padx=16)
            value = ctk.CTkLabel(card, text=format_currency(0), font=ctk.CTkFont(size=20, weight="bold"))
            value.grid(row=1, column=0, pady=(4, 12), padx=16)
            self._card_values[key] = value

    def _build_bottom_section(self):
        bottom = ctk.CTkFrame(self, fg_color="transparent")
        bottom.grid(row=1, column=0, sticky="nsew", padx=16, pady=(0, 12))
        bottom.grid_columnconfigure(0, weight=3)
        bottom.grid_columnconfigure(1, weight=2)
        bottom.grid_rowconfigure(1, weight=1)

        bar = ctk.CTkFrame(bottom, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=(0, 8), pady=(0, 6))
        ctk.CTkLabel(bar, text="Month:").pack(side="left", padx=(12, 4), pady=8)
        self._month_combo = ctk.CTkComboBox(
            bar, values=[ALL_MONTHS], variable=self._month_var, width=130,
            command=self._month_selected,
        )
        self._month_combo.pack(side="left")
        self._month_combo.bind("<Return>", lambda _e: self._month_selected(self._month_var.get()))
        ctk.CTkButton(bar, text="Export CSV", width=100, command=self._on_export).pack(
            side="right", padx=8
        )

        self._recent_frame = ctk.CTkScrollableFrame(bottom, label_text="Recent Transactions")
        self._recent_frame.grid(row=1, column=0, sticky="nsew", padx=(0, 8))
        self._recent_frame.grid_columnconfigure(0, weight=1)

        self._chart = ExpenseChart(bottom)
        self._chart.grid(row=0, column=1, rowspan=2, sticky="nsew", padx=(8, 0))

    def _month_selected(self, value: str):
        self._on_month_change("" if value == ALL_MONTHS else value.strip())

    # ── Rendering ────────────────────────────────────────────────────────────

    def set_months(self, months: list[str]):
        self._month_combo.configure(values=[ALL_MONTHS] + months)

    def render_summary(self, summary: dict):
        self._card_values["income"].configure(
            text=format_currency(summary["income"]), text_color=INCOME_COLOR
        )
        self._card_values["expense"].configure(
            text=format_currency(summary["expense"]), text_color=EXPENSE_COLOR
        )
        bal = summary["balance"]
        self._card_values["balance"].configure(
            text=format_currency(bal), text_color="#3b82f6" if bal >= 0 else "#f59e0b"
        )

    def render_list(self, rows: list[RecentRow]):
        for w in self._recent_frame.winfo_children():
            w.destroy()

        if not rows:
            ctk.CTkLabel(
                self._recent_frame, text="No transactions yet. Add one above! 🎉",
                text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        for idx, row in enumerate(rows):
            bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
            item = ctk.CTkFrame(self._recent_frame, fg_color=bg, corner_radius=4)
            item.grid(row=idx, column=0, sticky="ew", pady=1)
            item.grid_columnconfigure(2, weight=1)

            # Accent bar in the category color stored on the record
            ctk.CTkFrame(item, fg_color=row.color, width=5, corner_radius=0).grid(
                row=0, column=0, sticky="ns"
            )
            ctk.CTkLabel(item, text=row.date_text, width=85, anchor="w").grid(
                row=0, column=1, padx=6, pady=3
            )
            ctk.CTkLabel(item, text=row.category, anchor="w").grid(
                row=0, column=2, padx=4, sticky="ew"
            )
            ctk.CTkLabel(
                item, text=row.amount_text, anchor="e", width=110,
                text_color=INCOME_COLOR if row.type == "income" else EXPENSE_COLOR,
            ).grid(row=0, column=3, padx=6)
            ctk.CTkButton(
                item, text="🗑", width=28, height=24,
                fg_color="transparent", hover_color=("gray80", "gray30"),
                text_color=("gray10", "gray90"),
                command=lambda tx_id=row.id: self._on_delete(tx_id),
            ).grid(row=0, column=4, padx=(0, 6))

    def render_chart(self, data: dict | None, dark_mode: bool):
        self._chart.render(data, dark_mode)
