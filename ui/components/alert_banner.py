import customtkinter as ctk

from utils.constants import NOTIFY_COLORS, NOTIFY_ICONS, NOTIFY_DELAY_MS, NOTIFY_FADE_MS

_FADED_COLOR = ("gray70", "gray30")


class AlertBanner(ctk.CTkFrame):
    """Transient toast: shows an icon and message, fades, then removes itself.

    The close button removes the toast early and cancels whichever timer
    is still pending.
    """

    def __init__(self, master, message: str, kind: str = "success",
                 delay_ms: int = NOTIFY_DELAY_MS, fade_ms: int = NOTIFY_FADE_MS, **kwargs):
        color = NOTIFY_COLORS.get(kind, NOTIFY_COLORS["warning"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.kind = kind
        self._fade_ms = fade_ms
        self.grid_columnconfigure(0, weight=1)

        icon = NOTIFY_ICONS.get(kind, NOTIFY_ICONS["warning"])
        self._label = ctk.CTkLabel(
            self, text=f"{icon}  {message}", text_color="white",
            anchor="w", padx=10, pady=6,
        )
        self._label.grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color="#ffffff",
            text_color="white",
            command=self._remove,
        ).grid(row=0, column=1, padx=(0, 4))

        self._pending = self.after(delay_ms, self._fade_out)

    def _fade_out(self):
        self._pending = None
        self.configure(fg_color=_FADED_COLOR)
        self._label.configure(text_color=("gray40", "gray60"))
        self._pending = self.after(self._fade_ms, self._expire)

    def _expire(self):
        self._pending = None
        self.destroy()

    def _remove(self):
        # destroy() drops the Tcl command behind a pending after() script
        if self._pending is not None:
            self.after_cancel(self._pending)
            self._pending = None
        self.destroy()
