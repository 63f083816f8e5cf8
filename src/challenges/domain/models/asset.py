"""Asset domain model."""

from dataclasses import dataclass

from challenges.domain.models.enums import AssetType


@dataclass
class Asset:
    """
    A holding (portfolio side) or desired holding (benchmark side).

    Two assets describe the same position when company and asset type match
    exactly; company comparison is case-sensitive.
    """

    company: str
    asset_type: AssetType
    shares: int

    def __post_init__(self) -> None:
        if isinstance(self.asset_type, str):
            self.asset_type = AssetType(self.asset_type)

    @property
    def identity_key(self) -> tuple[str, AssetType]:
        """Return the (company, asset type) pair identifying this position."""
        return (self.company, self.asset_type)
