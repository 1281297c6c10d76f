from pydantic import BaseModel, Field
from typing import Optional

class AvailabilityVerdict(BaseModel):
    available: bool
    status: str

class Signals(BaseModel):
    buy_button: bool = Field(False, description="Add-to-cart or buy-now control present")
    price: str = Field("", description="Trimmed text of the first price element")
    availability_text: str = Field("", description="Lower-cased availability section text")

    @property
    def has_price(self) -> bool:
        return self.price != ""

class CheckResult(BaseModel):
    url: str
    short_url: str
    available: bool = False
    status: str = ""
    error: Optional[str] = Field(None, description="Fetch or parse failure, if any")
    notified: bool = False

