"""The one transient Session of a running app. Never persisted."""

from dataclasses import dataclass

from src.cc_common.enums import ActiveTab, TypeFilter
from src.cc_gateway.user.models import Player


@dataclass
class Session:
    is_logged_in: bool = False
    current_user: Player | None = None  # shared with the AccountStore, not a copy
    active_tab: str = ActiveTab.GROUNDS.value
    search_query: str = ""
    type_filter: str = TypeFilter.ALL.value

    def establish(self, player: Player) -> None:
        self.current_user = player
        self.is_logged_in = True

    def clear(self) -> None:
        self.current_user = None
        self.is_logged_in = False

    def select_view(self, active_tab: str | None = None, type_filter: str | None = None) -> None:
        """Apply a tab bar click.

        Switching tab alone resets the type filter to ``all``. Picking a
        ground type jumps to the grounds tab.
        """
        if active_tab is not None:
            self.active_tab = ActiveTab(active_tab).value
            if type_filter is None:
                self.type_filter = TypeFilter.ALL.value
        if type_filter is not None:
            self.type_filter = TypeFilter(type_filter).value
            if self.type_filter != TypeFilter.ALL.value:
                self.active_tab = ActiveTab.GROUNDS.value

    @property
    def user_name(self) -> str | None:
        return self.current_user.name if self.current_user else None

    @property
    def user_phone(self) -> str | None:
        return self.current_user.phone if self.current_user else None
