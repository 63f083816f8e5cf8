"""Transaction domain model."""

from dataclasses import dataclass

from challenges.domain.models.enums import AssetType, TransactionType


@dataclass
class Transaction:
    """
    A single trade needed to move a portfolio towards its benchmark.

    Shares are always non-negative; direction is carried by txn_type.
    """

    txn_type: TransactionType
    company: str
    asset_type: AssetType
    shares: int

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str):
            self.txn_type = TransactionType(self.txn_type)
        if isinstance(self.asset_type, str):
            self.asset_type = AssetType(self.asset_type)

    @property
    def identity_key(self) -> tuple[str, AssetType]:
        return (self.company, self.asset_type)

    @property
    def signed_shares(self) -> int:
        """Shares with BUY positive and SELL negative."""
        return self.shares if self.txn_type == TransactionType.BUY else -self.shares

    def to_line(self) -> str:
        """Render as TYPE,COMPANY,ASSETTYPE,SHARES."""
        return f"{self.txn_type.value},{self.company},{self.asset_type.value},{self.shares}"
