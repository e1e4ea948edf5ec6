from ..context import SessionContext
from .store import DomainStore


def get_theme(store: DomainStore) -> str:
    return store.theme()


def toggle_theme(store: DomainStore, ctx: SessionContext) -> str:
    with store.transaction():
        new_theme = "dark" if store.theme() == "light" else "light"
        store.save_theme(new_theme)
    ctx.theme = new_theme
    return new_theme
