"""Pydantic schemas for portfolio matcher input."""

from pydantic import BaseModel, Field

from challenges.domain.models import Asset, AssetType

# Share counts must fit a signed 32-bit integer
MAX_SHARES = 2**31


class AssetRecord(BaseModel):
    """One company,TYPE,shares triple from either side of a line."""

    company: str = Field(..., min_length=1, description="Company name, case-sensitive")
    asset_type: AssetType = Field(..., description="BOND or STOCK, exact case")
    shares: int = Field(..., ge=0, lt=MAX_SHARES, description="Share count")

    def to_domain(self) -> Asset:
        return Asset(
            company=self.company,
            asset_type=self.asset_type,
            shares=self.shares,
        )
