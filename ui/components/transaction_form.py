import customtkinter as ctk

from models.category import CATEGORY_NAMES
from ui.components.date_picker import DatePickerWidget
from utils.constants import DEFAULT_DATE_FORMAT, TRANSACTION_TYPES


class TransactionForm(ctk.CTkFrame):
    """Inline "add transaction" form.

    on_submit(amount_text, type_, category, date_str) returns the created
    transaction or None. Amount and date are cleared only on success;
    type and category are kept for the next entry.
    """

    def __init__(self, master, on_submit, date_format: str = DEFAULT_DATE_FORMAT, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)
        self._on_submit = on_submit

        ctk.CTkLabel(
            self, text="Add Transaction", font=ctk.CTkFont(size=14, weight="bold"), anchor="w",
        ).grid(row=0, column=0, columnspan=5, sticky="w", padx=12, pady=(10, 4))

        for col, text in enumerate(("Amount", "Type", "Category", "Date")):
            ctk.CTkLabel(self, text=text, text_color="gray60", anchor="w").grid(
                row=1, column=col, sticky="w", padx=(12, 4)
            )

        self._amount_var = ctk.StringVar()
        amount_entry = ctk.CTkEntry(self, textvariable=self._amount_var, width=120)
        amount_entry.grid(row=2, column=0, padx=(12, 4), pady=(0, 12), sticky="ew")
        amount_entry.bind("<Return>", lambda _e: self._submit())

        self._type_var = ctk.StringVar(value="expense")
        ctk.CTkSegmentedButton(
            self, values=TRANSACTION_TYPES, variable=self._type_var,
        ).grid(row=2, column=1, padx=(12, 4), pady=(0, 12), sticky="w")

        # Editable: any label is accepted, the list is just the known ones
        self._cat_var = ctk.StringVar(value=CATEGORY_NAMES[0])
        ctk.CTkComboBox(
            self, values=CATEGORY_NAMES, variable=self._cat_var, width=150,
        ).grid(row=2, column=2, padx=(12, 4), pady=(0, 12), sticky="w")

        self._date_picker = DatePickerWidget(self, date_format=date_format)
        self._date_picker.grid(row=2, column=3, padx=(12, 4), pady=(0, 12), sticky="w")

        ctk.CTkButton(self, text="Add", width=90, command=self._submit).grid(
            row=2, column=4, padx=(12, 12), pady=(0, 12)
        )

    def set_date_format(self, fmt_key: str):
        self._date_picker.set_date_format(fmt_key)

    def _submit(self):
        created = self._on_submit(
            self._amount_var.get(),
            self._type_var.get(),
            self._cat_var.get().strip(),
            self._date_picker.get(),
        )
        if created is not None:
            self._amount_var.set("")
            self._date_picker.clear()
