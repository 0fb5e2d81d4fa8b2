from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional, Tuple

# currency -> multiplier into the base currency
RateMap = Dict[str, float]


class RateQuery(BaseModel):
    """Request descriptor for one rate lookup.

    ``currencies`` keeps line-item order and duplicates so the rendered
    symbols list mirrors the invoice exactly.
    """

    model_config = ConfigDict(frozen=True)

    date: str
    base_currency: str
    currencies: List[str]

    @property
    def symbols(self) -> str:
        return ",".join(self.currencies)

    def cache_key(self) -> Tuple[str, str, str]:
        return (self.date, self.base_currency, self.symbols)

    def url(self, base_url: str, access_key: Optional[str] = None) -> str:
        # Built by hand: httpx param encoding would escape the commas.
        url = f"{base_url.rstrip('/')}/{self.date}?base={self.base_currency}&symbols={self.symbols}"
        if access_key:
            url += f"&access_key={access_key}"
        return url
