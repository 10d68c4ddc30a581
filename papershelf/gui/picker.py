"""
Native file picker backed by tkinter.

Opens the platform's open-file dialog restricted to PDF files. The dialog
blocks, so it runs on the picker's own thread.
"""

from typing import List

from ..ingestion import BlockingDialogPicker, PickResult


class TkFilePicker(BlockingDialogPicker):
    """
    Open-file dialog filtered to the allowed extensions.

    Args:
        extensions: Extensions offered by the dialog filter, e.g. [".pdf"].
        title: Dialog window title.
    """

    def __init__(self, extensions: List[str] = None, title: str = "Add paper"):
        self.extensions = extensions or [".pdf"]
        self.title = title

    def choose(self) -> PickResult:
        import tkinter
        from tkinter import filedialog

        root = tkinter.Tk()
        root.withdraw()
        root.attributes("-topmost", True)

        try:
            patterns = " ".join(f"*{ext}" for ext in self.extensions)
            selected = filedialog.askopenfilename(
                parent=root,
                title=self.title,
                filetypes=[("PDF Files", patterns)]
            )
        finally:
            root.destroy()

        if not selected:
            return PickResult.cancelled()

        return PickResult.local(selected)
