from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .errors import ConfigError, PolicyRefusal
from .units import format_size


class Verdict(Enum):
    ALLOW = "allow"
    CONFIRM = "confirm"
    REFUSE = "refuse"


@dataclass(frozen=True)
class SizePolicy:
    max_size: int  # hard cap, never exceeded
    warn_size: int  # above this the user has to confirm or pass --exceed

    def __post_init__(self) -> None:
        if self.max_size < 0 or self.warn_size < 0:
            raise ConfigError("Size limits must not be negative")
        if self.warn_size > self.max_size:
            raise ConfigError(
                f"Warning threshold {self.warn_size} is larger than the maximum filesize {self.max_size}"
            )


def check_size(size: int, policy: SizePolicy) -> Verdict:
    if size > policy.max_size:
        return Verdict.REFUSE
    if size > policy.warn_size:
        return Verdict.CONFIRM
    return Verdict.ALLOW


def enforce(size: int, policy: SizePolicy, exceed: bool, confirm: Callable[[], bool]) -> Verdict:
    """Raise ``PolicyRefusal`` unless ``size`` may be generated.

    ``confirm`` is only called when the size is over the soft threshold and
    ``exceed`` was not given.
    """
    verdict = check_size(size, policy)
    if verdict is Verdict.REFUSE:
        raise PolicyRefusal(
            f"Size '{size}' ({format_size(size)}) exceeds the maximum filesize of "
            f"'{policy.max_size}' ({format_size(policy.max_size)})",
            hint="Lower the size or raise GERF_MAX_SIZE",
        )
    if verdict is Verdict.CONFIRM and not exceed:
        if not confirm():
            raise PolicyRefusal(
                "Aborting",
                hint="Use the [ -e ] or [ --exceed ] flag to exceed the default maximum filesize",
            )
    return verdict
