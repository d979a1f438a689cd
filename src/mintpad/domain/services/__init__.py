"""Domain services for Mintpad.

Services contain business logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure or external frameworks.
"""

from mintpad.domain.services.compression_estimator import (
    CompressionSizeEstimator,
    ImageFormat,
    SizeEstimate,
    estimate_compressed_size,
)
from mintpad.domain.services.launch_state_machine import (
    GuardFailure,
    GuardFailureCode,
    LaunchState,
    LaunchStateMachine,
    TransitionRecord,
    TransitionResult,
    current_state,
    transition_launch_status,
)
from mintpad.domain.services.mint_allowance import (
    MintDecision,
    MintGate,
    MintRejection,
    RemainingMints,
    calculate_remaining,
    can_increment,
    validate_mint_quantity,
)
from mintpad.domain.services.phase_scheduler import (
    PhaseResolution,
    PhaseScheduler,
    ResolutionOutcome,
    UnavailableReason,
    next_phase_order,
    order_phases,
    remaining_allocation,
    resolve_active_phase,
)
from mintpad.domain.services.phase_status_sweeper import PhaseStatusSweeper, SweepResult
from mintpad.domain.services.phase_validator import (
    DUST_LIMIT_SATS,
    MAX_PHASE_WINDOW,
    PhaseErrorKind,
    PhaseValidationError,
    PhaseValidationWarning,
    PhaseValidator,
    PhaseWarningKind,
    clamp_max_per_wallet,
    validate_phase,
)
from mintpad.domain.services.time_conversion import (
    InvalidTimezoneError,
    local_to_utc,
    parse_utc,
    to_utc_iso,
    utc_to_local,
)
from mintpad.domain.services.whitelist_store import (
    InMemoryWhitelistStore,
    WhitelistNotFoundError,
    WhitelistStore,
    detach_whitelist,
)


__all__ = [
    "CompressionSizeEstimator",
    "DUST_LIMIT_SATS",
    "GuardFailure",
    "GuardFailureCode",
    "ImageFormat",
    "InMemoryWhitelistStore",
    "InvalidTimezoneError",
    "LaunchState",
    "LaunchStateMachine",
    "MAX_PHASE_WINDOW",
    "MintDecision",
    "MintGate",
    "MintRejection",
    "PhaseErrorKind",
    "PhaseResolution",
    "PhaseScheduler",
    "PhaseStatusSweeper",
    "PhaseValidationError",
    "PhaseValidationWarning",
    "PhaseValidator",
    "PhaseWarningKind",
    "RemainingMints",
    "ResolutionOutcome",
    "SizeEstimate",
    "SweepResult",
    "TransitionRecord",
    "TransitionResult",
    "UnavailableReason",
    "WhitelistNotFoundError",
    "WhitelistStore",
    "calculate_remaining",
    "can_increment",
    "clamp_max_per_wallet",
    "current_state",
    "detach_whitelist",
    "estimate_compressed_size",
    "local_to_utc",
    "next_phase_order",
    "order_phases",
    "parse_utc",
    "remaining_allocation",
    "resolve_active_phase",
    "to_utc_iso",
    "transition_launch_status",
    "utc_to_local",
    "validate_mint_quantity",
    "validate_phase",
]
