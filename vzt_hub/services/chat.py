from typing import List, Optional

import structlog

from ..config import settings
from ..context import SessionContext
from ..schemas.chat import ChatMessage
from .auth import require_user
from .store import DomainStore
from .time_rules import format_locale_timestamp


logger = structlog.get_logger(__name__)


def send_message(
    store: DomainStore,
    ctx: SessionContext,
    message: Optional[str],
    channel: Optional[str] = None,
) -> Optional[ChatMessage]:
    """Post ``message`` to ``channel``. Blank messages are ignored (returns None)."""
    text = (message or "").strip()
    if not text:
        return None
    user = require_user(ctx)
    channel = (channel or "").strip() or settings.default_chat_channel

    with store.transaction():
        messages = store.chat_messages()
        msg = ChatMessage(
            id=store.next_id(),
            user=user.name,
            message=text,
            timestamp=format_locale_timestamp(store.clock.now()),
            channel=channel,
        )
        messages.append(msg)
        store.save_chat_messages(messages)

    logger.info("chat_message_sent", user_id=user.id, channel=channel)
    return msg


def list_messages(store: DomainStore, channel: Optional[str] = None) -> List[ChatMessage]:
    channel = channel or settings.default_chat_channel
    return [m for m in store.chat_messages() if m.channel == channel]
