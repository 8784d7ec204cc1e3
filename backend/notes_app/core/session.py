from notes_app.core.deletion import DeletionWorkflow
from notes_app.core.draft import DraftForm
from notes_app.core.paging import NotesPage, page_after_delete, paginate
from notes_app.storage.notes_store import Note, NotesStore


class NotesSession:
    """
    Transient UI state for one user: search term, current page, the create
    dialog and the deletion workflow. Nothing here is persisted.
    """

    def __init__(self, store: NotesStore):
        self.store = store
        self.search = ""
        self.page = 1
        self.dialog_open = False
        self.draft = DraftForm()
        self.deletion = DeletionWorkflow(store, on_committed=self._correct_page)

    def _correct_page(self, count_before_delete: int) -> None:
        self.page = page_after_delete(self.page, count_before_delete)

    def set_search(self, term: str) -> None:
        self.search = term

    def set_page(self, page: int) -> None:
        if page < 1:
            raise ValueError("page must be >= 1")
        self.page = page

    def view(self) -> NotesPage:
        return paginate(self.store.all(), self.search, self.page)

    def open_dialog(self) -> None:
        self.draft.reset()
        self.dialog_open = True

    def close_dialog(self) -> None:
        self.dialog_open = False
        self.draft.reset()

    def submit_draft(self) -> Note | None:
        new_note = self.draft.attempt_submit()
        if new_note is None:
            return None
        note = self.store.create(new_note)
        self.close_dialog()
        return note
