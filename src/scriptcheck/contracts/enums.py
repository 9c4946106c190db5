"""Verdicts, purposes and run statuses used across subsystem boundaries."""

from enum import StrEnum


class Outcome(StrEnum):
    """Verdict for a single case.

    The expected outcome comes from the case transform's oracle; the actual
    outcome comes from running the validator.
    """

    PASS = "pass"
    FAIL = "fail"

    @classmethod
    def from_bool(cls, accepted: bool) -> "Outcome":
        return cls.PASS if accepted else cls.FAIL


class PurposeKind(StrEnum):
    """Why a script is being run within a transaction.

    Values:
        SPENDING: Consuming an output locked by a validator
        MINTING: Minting or burning under a currency policy
        CERTIFYING: Publishing a delegation certificate
        REWARDING: Withdrawing staking rewards
    """

    SPENDING = "spending"
    MINTING = "minting"
    CERTIFYING = "certifying"
    REWARDING = "rewarding"


class PropertyMode(StrEnum):
    """How a property compares verdicts.

    ORACLE compares the validator against the transform's expected outcome.
    PASS_ONLY requires every generated case to be accepted.
    """

    ORACLE = "oracle"
    PASS_ONLY = "pass_only"


class PropertyStatus(StrEnum):
    """Status of a finished property run.

    FAILED means a verdict mismatch was found (and shrunk).
    ERROR means the harness itself could not build a case.
    """

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
