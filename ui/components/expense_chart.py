import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from services.report_service import tooltip_label

DONUT_WIDTH = 0.35  # 65% cutout


class ExpenseChart(ctk.CTkFrame):
    """Expense breakdown donut with legend below and a hover tooltip."""

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        ctk.CTkLabel(
            self, text="Expense Breakdown",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))

        self._fig = Figure(figsize=(4, 4), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 10))

        self._wedges = []
        self._tips: list[str] = []
        self._annotation = None
        self._mpl.mpl_connect("motion_notify_event", self._on_hover)

    def _style(self, dark_mode: bool):
        bg = "#2b2b2b" if dark_mode else "#e4e4e4"
        self._fig.patch.set_facecolor(bg)
        self._ax.set_facecolor(bg)
        self._ax.set_axis_off()
        return "#cbd5e1" if dark_mode else "#334155"

    def render(self, data: dict | None, dark_mode: bool = False):
        """Redraw from {labels, values, colors}; None draws the empty placeholder."""
        ax = self._ax
        ax.clear()
        fg = self._style(dark_mode)
        self._wedges, self._tips, self._annotation = [], [], None

        if not data:
            placeholder = "#475569" if dark_mode else "#94a3b8"
            ax.text(0.5, 0.55, "No expenses yet", ha="center", va="center",
                    transform=ax.transAxes, color=placeholder, fontsize=18, fontweight="bold")
            ax.text(0.5, 0.42, "Add expenses to see breakdown", ha="center", va="center",
                    transform=ax.transAxes, color=placeholder, fontsize=12)
            self._mpl.draw_idle()
            return

        edge = "#2b2b2b" if dark_mode else "#ffffff"
        wedges, _ = ax.pie(
            data["values"],
            colors=data["colors"],
            startangle=90,
            counterclock=False,
            wedgeprops={"width": DONUT_WIDTH, "edgecolor": edge, "linewidth": 3},
        )
        ax.set_aspect("equal")
        legend = ax.legend(
            wedges, data["labels"],
            loc="upper center", bbox_to_anchor=(0.5, -0.02),
            ncol=min(3, len(wedges)), frameon=False,
        )
        for text in legend.get_texts():
            text.set_color(fg)

        total = sum(data["values"])
        self._wedges = list(wedges)
        self._tips = [
            tooltip_label(label, value, total)
            for label, value in zip(data["labels"], data["values"])
        ]
        self._annotation = ax.annotate(
            "", xy=(0, 0), xytext=(12, 12), textcoords="offset points",
            color="white", fontsize=10,
            bbox={"boxstyle": "round", "fc": (0, 0, 0, 0.8), "ec": "none"},
        )
        self._annotation.set_visible(False)
        self._mpl.draw_idle()

    def _on_hover(self, event):
        if self._annotation is None:
            return
        if event.inaxes is self._ax:
            for wedge, tip in zip(self._wedges, self._tips):
                hit, _ = wedge.contains(event)
                if hit:
                    self._annotation.xy = (event.xdata, event.ydata)
                    self._annotation.set_text(tip)
                    self._annotation.set_visible(True)
                    self._mpl.draw_idle()
                    return
        if self._annotation.get_visible():
            self._annotation.set_visible(False)
            self._mpl.draw_idle()
