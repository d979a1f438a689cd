"""Launch state machine for launchpad collections.

States: draft -> launchpad -> launchpad_live -> completed, with the reverse
edges launchpad -> draft (revert, only before the first launch),
launchpad_live -> launchpad (end live mint) and completed -> launchpad
(take an ended mint down). The "completed" state is a live collection whose
launch_status is completed.

Transitions only touch the collection's status fields and timestamps.
Phases, whitelists and minted counts are never modified here.
"""

import dataclasses
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from mintpad.core.logging import get_logger
from mintpad.domain.entities.auth_context import AuthContext
from mintpad.domain.entities.collection import (
    Collection,
    CollectionStatus,
    LaunchStatus,
)
from mintpad.domain.entities.phase import Phase

logger = get_logger(__name__)

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


class LaunchState(str, Enum):
    """States of the launch state machine."""

    DRAFT = "draft"
    LAUNCHPAD = "launchpad"
    LAUNCHPAD_LIVE = "launchpad_live"
    COMPLETED = "completed"


class GuardFailureCode(str, Enum):
    """Reasons a transition is refused."""

    INVALID_TRANSITION = "invalid_transition"
    NOT_AUTHORIZED = "not_authorized"
    ROYALTY_WALLET_REQUIRED = "royalty_wallet_required"
    BANNER_IMAGE_REQUIRED = "banner_image_required"
    BANNER_IMAGE_INVALID = "banner_image_invalid"
    PHASE_REQUIRED = "phase_required"
    SUPPLY_REQUIRED = "supply_required"
    ALREADY_LAUNCHED = "already_launched"


ALLOWED_TRANSITIONS: dict[LaunchState, frozenset[LaunchState]] = {
    LaunchState.DRAFT: frozenset({LaunchState.LAUNCHPAD}),
    LaunchState.LAUNCHPAD: frozenset({LaunchState.LAUNCHPAD_LIVE, LaunchState.DRAFT}),
    LaunchState.LAUNCHPAD_LIVE: frozenset({LaunchState.LAUNCHPAD, LaunchState.COMPLETED}),
    LaunchState.COMPLETED: frozenset({LaunchState.LAUNCHPAD}),
}


@dataclass(frozen=True)
class GuardFailure:
    """A refused transition with the precondition that failed."""

    code: GuardFailureCode
    message: str


@dataclass(frozen=True)
class TransitionRecord:
    """Audit record of an applied transition."""

    collection_id: str
    from_state: LaunchState
    to_state: LaunchState
    wallet_address: str | None
    at: datetime


@dataclass(frozen=True)
class TransitionResult:
    """Result of a transition request.

    Attributes:
        collection: The updated collection, or the unchanged one on failure.
        failure: Set when the transition was refused.
        record: Set when the transition was applied.
    """

    collection: Collection
    failure: GuardFailure | None = None
    record: TransitionRecord | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def current_state(collection: Collection) -> LaunchState | None:
    """Map a collection's status fields onto a machine state.

    Returns None for collections outside the launchpad workflow
    (self-inscribe and marketplace collections).
    """
    status = collection.collection_status
    if status == CollectionStatus.LAUNCHPAD_LIVE:
        if collection.launch_status == LaunchStatus.COMPLETED:
            return LaunchState.COMPLETED
        return LaunchState.LAUNCHPAD_LIVE
    if status == CollectionStatus.LAUNCHPAD:
        return LaunchState.LAUNCHPAD
    if status == CollectionStatus.DRAFT:
        return LaunchState.DRAFT
    return None


class LaunchStateMachine:
    """Applies guarded status transitions to collections."""

    @classmethod
    def launch_guard(
        cls, collection: Collection, phases: Sequence[Phase]
    ) -> GuardFailure | None:
        """Check the preconditions for going live. Returns the first failure."""
        if not (collection.creator_royalty_wallet or "").strip():
            return GuardFailure(
                code=GuardFailureCode.ROYALTY_WALLET_REQUIRED,
                message="Set a creator payment wallet before launching",
            )

        banner = (collection.banner_image_url or "").strip()
        if not banner:
            return GuardFailure(
                code=GuardFailureCode.BANNER_IMAGE_REQUIRED,
                message="Upload a banner image before launching",
            )
        if not URL_PATTERN.match(banner):
            return GuardFailure(
                code=GuardFailureCode.BANNER_IMAGE_INVALID,
                message="Banner image URL is not a valid http(s) URL",
            )

        if collection.total_supply <= 0:
            return GuardFailure(
                code=GuardFailureCode.SUPPLY_REQUIRED,
                message="Collection must have at least one item in supply before launching",
            )

        if not any(p.collection_id == collection.id for p in phases):
            return GuardFailure(
                code=GuardFailureCode.PHASE_REQUIRED,
                message="Collection must have at least one mint phase before launching",
            )

        return None

    @classmethod
    def authorization_guard(
        cls, collection: Collection, auth: AuthContext
    ) -> GuardFailure | None:
        if auth.can_manage(collection):
            return None
        return GuardFailure(
            code=GuardFailureCode.NOT_AUTHORIZED,
            message="Only the collection owner, a collaborator or an admin can change its status",
        )

    @classmethod
    def check(
        cls,
        collection: Collection,
        target: LaunchState,
        auth: AuthContext,
        phases: Sequence[Phase] = (),
    ) -> GuardFailure | None:
        """Return why ``target`` is unreachable, or None if the transition is allowed."""
        failure = cls.authorization_guard(collection, auth)
        if failure is not None:
            return failure

        source = current_state(collection)
        if source is None or target not in ALLOWED_TRANSITIONS[source]:
            return GuardFailure(
                code=GuardFailureCode.INVALID_TRANSITION,
                message=f"Cannot move a collection from '{source.value if source else collection.collection_status.value}' to '{target.value}'",
            )

        if target == LaunchState.LAUNCHPAD_LIVE:
            return cls.launch_guard(collection, phases)

        if source == LaunchState.LAUNCHPAD and target == LaunchState.DRAFT:
            if collection.has_launched:
                return GuardFailure(
                    code=GuardFailureCode.ALREADY_LAUNCHED,
                    message="A collection that has been launched cannot be reverted to draft",
                )

        return None

    @classmethod
    def apply(
        cls, collection: Collection, target: LaunchState, now: datetime
    ) -> Collection:
        """Return the collection with the status fields for ``target`` set."""
        if target == LaunchState.DRAFT:
            return dataclasses.replace(collection, collection_status=CollectionStatus.DRAFT)

        if target == LaunchState.LAUNCHPAD:
            return dataclasses.replace(
                collection,
                collection_status=CollectionStatus.LAUNCHPAD,
                launch_status=collection.launch_status or LaunchStatus.DRAFT,
            )

        if target == LaunchState.LAUNCHPAD_LIVE:
            return dataclasses.replace(
                collection,
                collection_status=CollectionStatus.LAUNCHPAD_LIVE,
                launch_status=LaunchStatus.ACTIVE,
                launched_at=collection.launched_at or now,
            )

        return dataclasses.replace(
            collection,
            launch_status=LaunchStatus.COMPLETED,
            mint_ended_at=collection.mint_ended_at or now,
        )

    @classmethod
    def transition(
        cls,
        collection: Collection,
        target: LaunchState | str,
        auth: AuthContext,
        phases: Sequence[Phase] = (),
        now: datetime | None = None,
    ) -> TransitionResult:
        """Move a collection to ``target`` if the guards allow it.

        Args:
            collection: The collection to transition.
            target: Desired machine state.
            auth: Caller performing the transition.
            phases: The collection's phases, needed for the launch guard.
            now: Transition time, defaults to the current UTC time.

        Returns:
            TransitionResult with the updated collection or the guard failure.
        """
        now = now or datetime.now(timezone.utc)

        try:
            target = LaunchState(target)
        except ValueError:
            failure = cls.authorization_guard(collection, auth) or GuardFailure(
                code=GuardFailureCode.INVALID_TRANSITION,
                message=f"'{target}' is not a launchpad state",
            )
        else:
            failure = cls.check(collection, target, auth, phases)

        if failure is not None:
            logger.info(
                "Launch transition refused",
                collection_id=collection.id,
                target=getattr(target, "value", target),
                code=failure.code.value,
                wallet_address=auth.wallet_address,
            )
            return TransitionResult(collection=collection, failure=failure)

        source = current_state(collection)
        updated = cls.apply(collection, target, now)
        record = TransitionRecord(
            collection_id=collection.id,
            from_state=source,
            to_state=target,
            wallet_address=auth.wallet_address,
            at=now,
        )
        logger.info(
            "Launch transition applied",
            collection_id=collection.id,
            from_state=source.value,
            to_state=target.value,
            wallet_address=auth.wallet_address,
        )
        return TransitionResult(collection=updated, record=record)


def transition_launch_status(
    collection: Collection,
    target: LaunchState | str,
    auth: AuthContext,
    phases: Sequence[Phase] = (),
    now: datetime | None = None,
) -> TransitionResult:
    """Module-level shortcut for LaunchStateMachine.transition."""
    return LaunchStateMachine.transition(collection, target, auth, phases, now)
