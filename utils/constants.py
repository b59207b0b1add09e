APP_NAME = "Expense Tracker"
APP_WIDTH = 1100
APP_HEIGHT = 760
DB_FILE = "expenses.db"

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATE_FORMAT = "DD/MM/YYYY"

# Key/value slots
TRANSACTIONS_KEY = "transactions"
DARK_MODE_KEY = "darkMode"
DATE_FORMAT_KEY = "date_format"

CURRENCY_SYMBOL = "₹"
RECENT_LIMIT = 10

CATEGORY_COLORS = {
    "Food":     "#ef4444",
    "Travel":   "#f59e0b",
    "Bills":    "#10b981",
    "Salary":   "#3b82f6",
    "Shopping": "#8b5cf6",
    "Other":    "#ec4899",
}
FALLBACK_COLOR = "#6b7280"

TRANSACTION_TYPES = ["income", "expense"]

# Toasts
NOTIFY_DELAY_MS = 3000
NOTIFY_FADE_MS = 300

NOTIFY_COLORS = {
    "success": "#10b981",
    "error":   "#ef4444",
    "warning": "#f59e0b",
}

NOTIFY_ICONS = {
    "success": "✔",
    "error":   "❗",
    "warning": "⚠",
}

INCOME_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
