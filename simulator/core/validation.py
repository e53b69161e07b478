"""Turn raw user input into validated investment parameters."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from simulator.config import DEFAULT_LIMITS, ValidationLimits
from simulator.core.projection import projected_balance
from simulator.errors import InputAbandoned, InvalidInput
from simulator.models import MONTHS_PER_YEAR, InvestmentParameters

logger = logging.getLogger(__name__)

INITIAL_CAPITAL = "initialCapital"
MONTHLY_CONTRIBUTION = "monthlyContribution"
TERM_YEARS = "termYears"
ANNUAL_RATE = "annualRate"

# Order in which an interactive session asks for the fields.
FIELD_ORDER: Tuple[str, ...] = (
    INITIAL_CAPITAL,
    MONTHLY_CONTRIBUTION,
    TERM_YEARS,
    ANNUAL_RATE,
)

_SNAKE_NAMES = {
    INITIAL_CAPITAL: "initial_capital",
    MONTHLY_CONTRIBUTION: "monthly_contribution",
    TERM_YEARS: "term_years",
    ANNUAL_RATE: "annual_rate",
}


@dataclass(frozen=True)
class ValidationFailure:
    """Every field-level error found in one set of raw inputs."""

    errors: Tuple[InvalidInput, ...]

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    def to_detail(self) -> List[Dict[str, str]]:
        return [{"field": error.field, "message": error.message} for error in self.errors]


def prompt_for(field: str, limits: ValidationLimits = DEFAULT_LIMITS) -> str:
    """Question shown to the user when asking for ``field``."""
    prompts = {
        INITIAL_CAPITAL: "Initial capital",
        MONTHLY_CONTRIBUTION: "Monthly contribution",
        TERM_YEARS: f"Investment term in years ({limits.min_years}-{limits.max_years})",
        ANNUAL_RATE: "Expected annual interest rate in % (e.g. 8.5)",
    }
    return prompts[field]


def _parse_real(field: str, raw: Any, message: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise InvalidInput(field, message, raw)
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (ValueError, OverflowError):
        raise InvalidInput(field, message, raw) from None

    if not math.isfinite(value):
        raise InvalidInput(field, message, raw)
    return value


def _parse_amount(field: str, raw: Any, label: str) -> float:
    message = f"{label} must be a number greater than or equal to zero."
    value = _parse_real(field, raw, message)
    if value < 0:
        raise InvalidInput(field, message, raw)
    return value


def _parse_term(raw: Any, limits: ValidationLimits) -> int:
    message = (
        f"The term must be a whole number of years between "
        f"{limits.min_years} and {limits.max_years}."
    )
    value = _parse_real(TERM_YEARS, raw, message)
    if not value.is_integer():
        raise InvalidInput(TERM_YEARS, message, raw)
    years = int(value)
    if years < limits.min_years or years > limits.max_years:
        raise InvalidInput(TERM_YEARS, message, raw)
    return years


def _parse_rate(raw: Any) -> float:
    message = "The interest rate must be a number greater than zero."
    value = _parse_real(ANNUAL_RATE, raw, message)
    if value <= 0:
        raise InvalidInput(ANNUAL_RATE, message, raw)
    return value / 100


def parse_field(
    field: str,
    raw: Any,
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> Union[float, int]:
    """Validate a single raw value and return it normalized.

    ``raw=None`` means the prompt for ``field`` was cancelled and raises
    :class:`InputAbandoned`. Anything malformed or out of range raises
    :class:`InvalidInput`. The annual rate is returned as a decimal fraction.
    """
    if raw is None:
        raise InputAbandoned(field)

    if field == INITIAL_CAPITAL:
        return _parse_amount(field, raw, "The initial capital")
    if field == MONTHLY_CONTRIBUTION:
        return _parse_amount(field, raw, "The monthly contribution")
    if field == TERM_YEARS:
        return _parse_term(raw, limits)
    if field == ANNUAL_RATE:
        return _parse_rate(raw)
    raise ValueError(f"unknown field {field!r}")


def check_magnitude(values: Mapping[str, Union[float, int]]) -> None:
    """Reject parsed values whose projection cannot be represented as a float.

    Blames the monthly contribution when the contributions alone overflow,
    otherwise the interest rate.
    """
    contributions = values[MONTHLY_CONTRIBUTION] * MONTHS_PER_YEAR * values[TERM_YEARS]
    if not math.isfinite(contributions):
        raise InvalidInput(
            MONTHLY_CONTRIBUTION,
            "The monthly contribution is too large to project over this term.",
            values[MONTHLY_CONTRIBUTION],
        )

    balance = projected_balance(
        values[INITIAL_CAPITAL],
        values[MONTHLY_CONTRIBUTION],
        int(values[TERM_YEARS]),
        values[ANNUAL_RATE],
    )
    if not math.isfinite(balance):
        raise InvalidInput(
            ANNUAL_RATE,
            "The projected balance is too large to compute; lower the rate or the amounts.",
            values[ANNUAL_RATE] * 100,
        )


def _lookup(raw: Mapping[str, Any], field: str) -> Any:
    if field in raw:
        return raw[field]
    return raw.get(_SNAKE_NAMES[field])


def validate(
    raw: Mapping[str, Any],
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> Union[InvestmentParameters, ValidationFailure]:
    """Validate all four raw inputs at once.

    Returns the parameters only when every field is valid; otherwise a
    :class:`ValidationFailure` listing each rejected field. Missing fields
    are reported as invalid rather than treated as a cancellation.
    """
    values: Dict[str, Union[float, int]] = {}
    errors: List[InvalidInput] = []

    for field in FIELD_ORDER:
        value = _lookup(raw, field)
        if value is None:
            errors.append(InvalidInput(field, "This field is required."))
            continue
        try:
            values[field] = parse_field(field, value, limits)
        except InvalidInput as exc:
            errors.append(exc)

    if not errors:
        try:
            check_magnitude(values)
        except InvalidInput as exc:
            errors.append(exc)

    if errors:
        logger.info("rejected simulation input: %s", ", ".join(error.field for error in errors))
        return ValidationFailure(errors=tuple(errors))

    return InvestmentParameters(**values)


def collect_parameters(
    ask: Callable[[str, str], Optional[str]],
    notify: Optional[Callable[[InvalidInput], None]] = None,
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> InvestmentParameters:
    """Ask for each field in turn until it is valid.

    ``ask(field, prompt)`` returns the user's answer, or ``None`` when the
    user cancels. Invalid answers are passed to ``notify`` and the same field
    is asked again. Once all four are valid, a combination too large to
    project is reported the same way and only the blamed field is asked again.
    The first cancellation aborts the whole run by raising
    :class:`InputAbandoned`; no partially filled parameters are returned.
    """
    values: Dict[str, Union[float, int]] = {}

    while True:
        for field in FIELD_ORDER:
            while field not in values:
                answer = ask(field, prompt_for(field, limits))
                try:
                    values[field] = parse_field(field, answer, limits)
                except InvalidInput as exc:
                    logger.info("invalid %s: %r", field, exc.value)
                    if notify is not None:
                        notify(exc)
                except InputAbandoned:
                    logger.info("input abandoned at %s", field)
                    raise
        try:
            check_magnitude(values)
        except InvalidInput as exc:
            logger.info("projection out of range, asking again for %s", exc.field)
            if notify is not None:
                notify(exc)
            del values[exc.field]
        else:
            return InvestmentParameters(**values)
