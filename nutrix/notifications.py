"""Topic-based notifications pushed to websocket sessions."""

from __future__ import annotations

import json
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

log = logging.getLogger(__name__)

SESSION_ID_KEY = "sessionID"
ALL_TOPICS = "all"


class NotificationService(ABC):
    """Something that can deliver a message to a topic's subscribers."""

    @abstractmethod
    def send_to_topic(self, topic_name: str, message: str) -> None:
        """Deliver a message to every subscriber of a topic."""


@dataclass(eq=False)
class Session:
    """A connected client: a way to send text plus per-session data."""

    sender: Callable[[str], None]
    data: dict[str, Any] = field(default_factory=dict)

    def send(self, message: str) -> None:
        self.sender(message)


class WebsocketHub(NotificationService):
    """Keeps sessions and topic subscriptions and routes messages."""

    def __init__(self, config: Any = None) -> None:
        self.config = config
        self.topics: dict[str, list[str]] = {}
        self._sessions: list[Session] = []
        self._lock = threading.RLock()

    def send_to_topic(self, topic_name: str, message: str) -> None:
        with self._lock:
            recipients = [
                subscriber
                for name, subscribers in self.topics.items()
                if name in (topic_name, ALL_TOPICS)
                for subscriber in subscribers
            ]
        for session_id in recipients:
            self.send_to_session(message, session_id)

    def send_to_session(self, msg: str, session_id: str) -> None:
        with self._lock:
            targets = [s for s in self._sessions if s.data.get(SESSION_ID_KEY) == session_id]
        for session in targets:
            session.send(msg)

    def handle_connect(self, session: Session) -> str:
        """Register a new session and give it a fresh id."""
        session_id = str(uuid.uuid4())
        session.data[SESSION_ID_KEY] = session_id
        with self._lock:
            self._sessions.append(session)
        return session_id

    def add_session_to_topic(self, topic_name: str, session_id: str) -> None:
        with self._lock:
            self.topics.setdefault(topic_name, []).append(session_id)

    def handle_message(self, session: Session, msg: str | bytes) -> None:
        """React to a message a client sent."""
        session_id = session.data.get(SESSION_ID_KEY)
        if session_id is None:
            return
        text = msg.decode("utf-8") if isinstance(msg, bytes) else msg
        try:
            message = json.loads(text)
        except ValueError as exc:
            log.error("%s", exc)
            return
        if not isinstance(message, dict):
            log.error("message is not a JSON object")
            return

        kind = message.get("type")
        if kind == "subscribe":
            self.add_session_to_topic(message.get("topic_name", ""), session_id)

        if kind == "topic_message" and message.get("topic_name") == "order_finished":
            reply = json.dumps(
                {
                    "type": "topic_message",
                    "topic_name": "order_finished",
                    "severity": "info",
                    "order_id": message.get("order_id", ""),
                }
            )
            self.send_to_topic("order_finish", reply)
            self.send_to_session('{state:"success"}', session_id)

        if kind == "chat_message":
            self.send_to_topic("chat_message", text)

    def get_topic(self, topic_name: str) -> list[str]:
        """Return the subscribers of a topic; raise LookupError if unknown."""
        with self._lock:
            if topic_name not in self.topics:
                raise LookupError("topic not found")
            return list(self.topics[topic_name])


_hub: WebsocketHub | None = None
_hub_lock = threading.Lock()


def spawn_notification_service(name: str, config: Any) -> NotificationService:
    """Return the process-wide notification service of the given kind."""
    global _hub
    if name != "melody":
        raise ValueError(f"unknown notification service name: {name}")
    with _hub_lock:
        if _hub is None:
            _hub = WebsocketHub(config)
        return _hub