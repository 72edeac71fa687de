"""
Notification preference filtering.

This module decides which candidate recipients may receive a push:
Mute -> Type preference -> Push token

Preferences are default-allow: a recipient is dropped only when the
preference column for the event type is explicitly False. Unset (None)
columns and kinds without a preference column always pass.

Usage:
    from notifications.preferences import PreferenceGate

    # Full gate with a reason code when nobody survives
    gate = PreferenceGate.apply(recipients, "message", conversation_scoped=True)
    if not gate:
        return Skipped(gate.reason)

    # Individual stages, applied in a handler's own order
    recipients = PreferenceGate.drop_tokenless(recipients)
    recipients = PreferenceGate.drop_disabled(recipients, NotificationKind.MESSAGE)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from notifications.composer import kind_spec
from notifications.models import SkipReason
from notifications.types import Recipient

logger = logging.getLogger(__name__)

# Anything carrying an is_muted flag (Participation or Recipient)
M = TypeVar("M")


@dataclass(frozen=True)
class GateResult:
    """
    Recipients that passed the gate.

    Attributes:
        recipients: Surviving recipients, in input order
        reason: Skip reason when nobody survived, else None
    """

    recipients: list[Recipient] = field(default_factory=list)
    reason: str | None = None

    @property
    def tokens(self) -> list[str]:
        return [recipient.push_token for recipient in self.recipients]

    def __bool__(self) -> bool:
        return bool(self.recipients)


class PreferenceGate:
    """Filters candidate recipients by mute state, preference and token."""

    @staticmethod
    def drop_muted(candidates: Iterable[M]) -> list[M]:
        """Remove candidates that muted the conversation."""
        return [candidate for candidate in candidates if not candidate.is_muted]

    @staticmethod
    def is_enabled(recipient: Recipient, kind: str | None) -> bool:
        """
        Check whether a recipient accepts pushes of the given kind.

        Only an explicit False in the kind's preference column disables.
        """
        preference_field = kind_spec(kind).preference_field
        if preference_field is None:
            return True
        return recipient.preferences.get(preference_field) is not False

    @classmethod
    def drop_disabled(
        cls,
        recipients: Iterable[Recipient],
        kind: str | None,
    ) -> list[Recipient]:
        """Remove recipients that explicitly disabled the given kind."""
        return [
            recipient for recipient in recipients if cls.is_enabled(recipient, kind)
        ]

    @staticmethod
    def drop_tokenless(recipients: Iterable[Recipient]) -> list[Recipient]:
        """Remove recipients without a usable push token."""
        return [recipient for recipient in recipients if recipient.push_token]

    @classmethod
    def apply(
        cls,
        recipients: Iterable[Recipient],
        kind: str | None,
        conversation_scoped: bool = False,
    ) -> GateResult:
        """
        Run every stage and report why the result is empty, if it is.

        Args:
            recipients: Candidate recipients
            kind: Notification type used to pick the preference column
            conversation_scoped: Whether mute flags apply to this event

        Returns:
            GateResult with the survivors, or an empty result and a reason
        """
        remaining = list(recipients)
        if not remaining:
            return GateResult(reason=SkipReason.NO_RECIPIENTS)

        if conversation_scoped:
            remaining = cls.drop_muted(remaining)
            if not remaining:
                return GateResult(reason=SkipReason.ALL_MUTED)

        remaining = cls.drop_disabled(remaining, kind)
        if not remaining:
            return GateResult(reason=SkipReason.ALL_PREFERENCE_DISABLED)

        remaining = cls.drop_tokenless(remaining)
        if not remaining:
            return GateResult(reason=SkipReason.NO_PUSH_TOKENS)

        logger.debug(f"Preference gate passed {len(remaining)} recipient(s) for {kind}")
        return GateResult(recipients=remaining)
