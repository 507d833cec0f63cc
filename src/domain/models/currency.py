"""Currency formatting profiles."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.domain.constants import ALTERNATE_CURRENCY_ID


@dataclass(frozen=True)
class CurrencyProfile:
    """Formatting policy for one currency.

    Attributes:
        symbol: Currency symbol substituted for ``%s``.
        precision: Number of fractional digits.
        thousand: Thousands separator.
        decimal: Decimal separator.
        format: Arrangement pattern; ``%v`` is the value, ``%s`` the symbol.
    """

    symbol: str = ""
    precision: int = 2
    thousand: str = ","
    decimal: str = "."
    format: str = "%s%v"


@dataclass(frozen=True)
class CurrencyProfiles:
    """Immutable mapping from currency id to profile, with a fallback."""

    default: CurrencyProfile = CurrencyProfile()
    by_id: Mapping[int, CurrencyProfile] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_id", MappingProxyType(dict(self.by_id)))

    def resolve(self, currency_id) -> CurrencyProfile:
        """Return the profile for a currency selector.

        Args:
            currency_id: Selector such as ``1``, ``"1"`` or ``None``.

        Returns:
            CurrencyProfile: Matching profile, else the default profile.
        """
        key = _selector_key(currency_id)
        if key is None:
            return self.default
        return self.by_id.get(key, self.default)

    def merged(
        self,
        extra: Mapping[int, CurrencyProfile],
    ) -> "CurrencyProfiles":
        """Return a copy with ``extra`` profiles added or replaced."""
        profiles = dict(self.by_id)
        profiles.update(extra)
        return CurrencyProfiles(default=self.default, by_id=profiles)


def _selector_key(currency_id) -> int | None:
    if currency_id is None or isinstance(currency_id, bool):
        return None
    try:
        number = float(currency_id)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


DEFAULT_PROFILE = CurrencyProfile()

FC_PROFILE = CurrencyProfile(
    symbol="FC",
    precision=2,
    thousand=".",
    decimal=",",
    format="%v %s",
)

DEFAULT_CURRENCY_PROFILES = CurrencyProfiles(
    default=DEFAULT_PROFILE,
    by_id={ALTERNATE_CURRENCY_ID: FC_PROFILE},
)


__all__ = [
    "CurrencyProfile",
    "CurrencyProfiles",
    "DEFAULT_PROFILE",
    "FC_PROFILE",
    "DEFAULT_CURRENCY_PROFILES",
]
