"""Mint phase validation service.

Validates a single phase definition (name, time window, price, per-wallet
cap, allocation, fee rates, whitelist reference) and a collection's phase
list as a whole. Every rule runs on every call so the caller can display
all problems at once.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from mintpad.domain.entities.collection import Collection
from mintpad.domain.entities.phase import Phase
from mintpad.domain.services.phase_scheduler import is_last_phase
from mintpad.domain.services.time_conversion import ensure_utc
from mintpad.domain.services.whitelist_store import WhitelistStore

# Minimum non-zero on-chain payment, in sats
DUST_LIMIT_SATS = 546

MAX_PHASE_WINDOW = timedelta(days=10)

MIN_PER_WALLET = 1
MAX_PER_WALLET = 10

# sat/vB
MIN_FEE_RATE = 1


class PhaseErrorKind(str, Enum):
    """Machine-readable phase validation error codes."""

    NAME_REQUIRED = "name_required"
    START_TIME_REQUIRED = "start_time_required"
    END_TIME_REQUIRED = "end_time_required"
    END_BEFORE_START = "end_before_start"
    WINDOW_TOO_LONG = "window_too_long"
    PRICE_NEGATIVE = "price_negative"
    PRICE_BELOW_DUST_LIMIT = "price_below_dust_limit"
    MAX_PER_WALLET_OUT_OF_RANGE = "max_per_wallet_out_of_range"
    WHITELIST_NOT_FOUND = "whitelist_not_found"
    ALLOCATION_INVALID = "allocation_invalid"
    FEE_RATE_RANGE_INVALID = "fee_rate_range_invalid"


class PhaseWarningKind(str, Enum):
    """Configurations that are accepted but block every minter."""

    WHITELIST_EMPTY = "whitelist_empty"
    WHITELIST_UNASSIGNED = "whitelist_unassigned"


@dataclass(frozen=True)
class PhaseValidationError:
    """A single phase validation error.

    Attributes:
        field: The offending field name.
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: PhaseErrorKind


@dataclass(frozen=True)
class PhaseValidationWarning:
    """A phase configuration worth surfacing to the operator."""

    field: str
    message: str
    code: PhaseWarningKind


def clamp_max_per_wallet(value: int | None) -> int | None:
    """Clamp a form value into the allowed per-wallet range."""
    if value is None:
        return None
    return min(max(MIN_PER_WALLET, value), MAX_PER_WALLET)


class PhaseValidator:
    """Validator for mint phase definitions."""

    @classmethod
    def validate_name(cls, phase: Phase) -> list[PhaseValidationError]:
        if phase.phase_name and phase.phase_name.strip():
            return []
        return [
            PhaseValidationError(
                field="phase_name",
                message="Phase name is required",
                code=PhaseErrorKind.NAME_REQUIRED,
            )
        ]

    @classmethod
    def validate_window(cls, phase: Phase) -> list[PhaseValidationError]:
        """Validate start/end times.

        The end time is only compared once a start time exists, so a missing
        start is reported once rather than cascading into window errors.
        """
        errors = []

        if phase.start_time is None:
            errors.append(
                PhaseValidationError(
                    field="start_time",
                    message="Start time is required",
                    code=PhaseErrorKind.START_TIME_REQUIRED,
                )
            )
            return errors

        if phase.end_time is None:
            return errors

        # Naive bounds are read as UTC, as the scheduler does
        start = ensure_utc(phase.start_time)
        end = ensure_utc(phase.end_time)

        if end <= start:
            errors.append(
                PhaseValidationError(
                    field="end_time",
                    message="End time must be after start time",
                    code=PhaseErrorKind.END_BEFORE_START,
                )
            )
        elif end - start > MAX_PHASE_WINDOW:
            errors.append(
                PhaseValidationError(
                    field="end_time",
                    message=f"End date cannot be more than {MAX_PHASE_WINDOW.days} days from start date",
                    code=PhaseErrorKind.WINDOW_TOO_LONG,
                )
            )

        return errors

    @classmethod
    def validate_price(cls, phase: Phase) -> list[PhaseValidationError]:
        price = phase.mint_price_sats
        if price < 0:
            return [
                PhaseValidationError(
                    field="mint_price_sats",
                    message="Price cannot be negative",
                    code=PhaseErrorKind.PRICE_NEGATIVE,
                )
            ]
        if 0 < price < DUST_LIMIT_SATS:
            return [
                PhaseValidationError(
                    field="mint_price_sats",
                    message=f"Price must be 0 (free) or at least {DUST_LIMIT_SATS} sats",
                    code=PhaseErrorKind.PRICE_BELOW_DUST_LIMIT,
                )
            ]
        return []

    @classmethod
    def validate_limits(cls, phase: Phase) -> list[PhaseValidationError]:
        """Validate per-wallet cap, phase allocation and fee rates."""
        errors = []

        if phase.max_per_wallet is not None and not (
            MIN_PER_WALLET <= phase.max_per_wallet <= MAX_PER_WALLET
        ):
            errors.append(
                PhaseValidationError(
                    field="max_per_wallet",
                    message=f"Max per wallet must be between {MIN_PER_WALLET} and {MAX_PER_WALLET}",
                    code=PhaseErrorKind.MAX_PER_WALLET_OUT_OF_RANGE,
                )
            )

        if phase.phase_allocation is not None and phase.phase_allocation < 1:
            errors.append(
                PhaseValidationError(
                    field="phase_allocation",
                    message="Phase allocation must be a positive number",
                    code=PhaseErrorKind.ALLOCATION_INVALID,
                )
            )

        fees_ordered = (
            MIN_FEE_RATE <= phase.min_fee_rate <= phase.suggested_fee_rate <= phase.max_fee_rate
        )
        if not fees_ordered:
            errors.append(
                PhaseValidationError(
                    field="suggested_fee_rate",
                    message=f"Fee rates must satisfy {MIN_FEE_RATE} <= min <= suggested <= max",
                    code=PhaseErrorKind.FEE_RATE_RANGE_INVALID,
                )
            )

        return errors

    @classmethod
    def validate_whitelist(
        cls,
        phase: Phase,
        collection: Collection,
        whitelists: WhitelistStore | None,
    ) -> list[PhaseValidationError]:
        """Check the whitelist reference of a whitelist-only phase.

        Without a store there is nothing to resolve the reference against,
        so the check is skipped.
        """
        if not phase.whitelist_only or not phase.whitelist_id or whitelists is None:
            return []

        whitelist = whitelists.get(phase.whitelist_id)
        if whitelist is not None and whitelist.collection_id == collection.id:
            return []

        return [
            PhaseValidationError(
                field="whitelist_id",
                message=f"Whitelist '{phase.whitelist_id}' not found for this collection",
                code=PhaseErrorKind.WHITELIST_NOT_FOUND,
            )
        ]

    @classmethod
    def validate(
        cls,
        phase: Phase,
        collection: Collection,
        whitelists: WhitelistStore | None = None,
    ) -> list[PhaseValidationError]:
        """Validate a single phase definition.

        Args:
            phase: The phase to validate.
            collection: The collection the phase belongs to.
            whitelists: Store used to resolve the phase's whitelist reference.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        errors.extend(cls.validate_name(phase))
        errors.extend(cls.validate_window(phase))
        errors.extend(cls.validate_price(phase))
        errors.extend(cls.validate_limits(phase))
        errors.extend(cls.validate_whitelist(phase, collection, whitelists))
        return errors

    @classmethod
    def warnings(
        cls,
        phase: Phase,
        whitelists: WhitelistStore | None = None,
    ) -> list[PhaseValidationWarning]:
        """Return non-blocking warnings for a phase.

        A whitelist-only phase without a whitelist, or with an empty one, is
        valid but nobody can mint in it.
        """
        if not phase.whitelist_only:
            return []

        if not phase.whitelist_id:
            return [
                PhaseValidationWarning(
                    field="whitelist_id",
                    message="Phase is whitelist-only but no whitelist is assigned",
                    code=PhaseWarningKind.WHITELIST_UNASSIGNED,
                )
            ]

        if whitelists is not None and whitelists.get(phase.whitelist_id) is not None:
            if whitelists.entry_count(phase.whitelist_id) == 0:
                return [
                    PhaseValidationWarning(
                        field="whitelist_id",
                        message="Assigned whitelist has no entries; no wallet can mint in this phase",
                        code=PhaseWarningKind.WHITELIST_EMPTY,
                    )
                ]

        return []

    @classmethod
    def validate_schedule(
        cls,
        phases: list[Phase],
        collection: Collection,
        whitelists: WhitelistStore | None = None,
    ) -> dict[str, list[PhaseValidationError]]:
        """Validate a collection's full phase list.

        Runs ``validate`` on every phase and additionally requires an end time
        on each phase except the last one of a collection that extends its
        last phase.

        Returns:
            Errors keyed by phase ID; phases without errors are omitted.
        """
        result: dict[str, list[PhaseValidationError]] = {}

        for phase in phases:
            errors = cls.validate(phase, collection, whitelists)

            open_ended_allowed = collection.extend_last_phase and is_last_phase(phase, phases)
            if phase.end_time is None and phase.start_time is not None and not open_ended_allowed:
                errors.append(
                    PhaseValidationError(
                        field="end_time",
                        message="End time is required unless this is the last phase and the last phase is extended",
                        code=PhaseErrorKind.END_TIME_REQUIRED,
                    )
                )

            if errors:
                result[phase.id] = errors

        return result


def validate_phase(
    phase: Phase,
    collection: Collection,
    whitelists: WhitelistStore | None = None,
) -> list[PhaseValidationError]:
    """Validate a single phase; see PhaseValidator.validate."""
    return PhaseValidator.validate(phase, collection, whitelists)
