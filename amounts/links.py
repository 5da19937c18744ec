"""Account link rendering for amount tables.

The contact directory and the signed-in account are passed in explicitly as
a read-only DisplayContext; nothing here keeps process-wide state.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

NO_ACCOUNT = "/"
YOU = "You"


@dataclass(frozen=True)
class DisplayContext:
    """Read-only lookup data for account labels.

    Attributes:
        contacts: Account RS address -> contact name
        account_rs: RS address of the signed-in account, if any
    """

    contacts: Mapping[str, str] = field(default_factory=dict)
    account_rs: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "contacts", MappingProxyType(dict(self.contacts)))


EMPTY_CONTEXT = DisplayContext()


def account_title(
    account_rs: str,
    context: DisplayContext,
    title: str | None = None,
    keep_rs_format: bool = False,
) -> str:
    """Pick the label for an account.

    Priority: explicit title, raw RS address when keep_rs_format, "You" for
    the signed-in account, contact name, RS address.
    """
    if title:
        return title[:1].upper() + title[1:]
    if keep_rs_format:
        return account_rs
    if context.account_rs is not None and account_rs == context.account_rs:
        return YOU
    return context.contacts.get(account_rs, account_rs)


def account_link(
    record: Mapping[str, Any],
    key: str,
    context: DisplayContext = EMPTY_CONTEXT,
    title: str | None = None,
    keep_rs_format: bool = False,
    extra_class: str = "",
) -> str:
    """Render the anchor for the account stored under `key` in a record.

    The RS address is read from record[key + "RS"], falling back to the
    numeric id in record[key]. Returns "/" when neither is present.

    >>> account_link({"senderRS": "NXT-XK4R-7VJU-6EQG-7R335"}, "sender")
    "<a href='#' data-user='NXT-XK4R-7VJU-6EQG-7R335' class='show_account_modal_action user-info'>NXT-XK4R-7VJU-6EQG-7R335</a>"
    """
    account_rs = record.get(key + "RS")
    if account_rs is None:
        account_id = record.get(key)
        if account_id is None:
            return NO_ACCOUNT
        account_rs = str(account_id)

    css = "show_account_modal_action user-info"
    if extra_class:
        css += " " + extra_class
    label = account_title(account_rs, context, title, keep_rs_format)
    return (
        f"<a href='#' data-user='{html.escape(account_rs)}' class='{html.escape(css)}'>"
        f"{html.escape(label)}</a>"
    )
