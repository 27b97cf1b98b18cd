"""Request descriptors for the dining menu endpoints."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ucsc_dining.domain.halls import DiningHall

MENU_ACTION = "read"


class MenuEndpoint(str, Enum):
    """Observed generations of the upstream menu endpoint."""

    MENU_SAMP = "menu_samp"
    LEGACY = "legacy"

    @property
    def url(self) -> str:
        """Absolute URL of the endpoint."""
        return _ENDPOINT_URLS[self]

    @property
    def method(self) -> str:
        """HTTP method the endpoint accepts."""
        return "POST" if self is MenuEndpoint.LEGACY else "GET"


_ENDPOINT_URLS = {
    MenuEndpoint.MENU_SAMP: "http://nutrition.sa.ucsc.edu/menuSamp.asp",
    MenuEndpoint.LEGACY: "http://eat.ucsc.edu/menu.php",
}


class MenuRequest(BaseModel):
    """Immutable parameters for a single menu fetch."""

    model_config = ConfigDict(frozen=True)

    hall: DiningHall
    serve_date: str = Field(pattern=r"^\d{2}/\d{2}/\d{4}$")
    action: str = MENU_ACTION
    # Documented upstream as "UC Santa Cruz Dining" and "1", never enforced.
    school_name: str | None = None
    na_flag: str | None = None

    def query_params(self) -> dict[str, str]:
        """Return query parameters for the menuSamp endpoint."""
        params = {
            "locationNum": str(self.hall.location_num),
            "locationName": self.hall.location_name,
            "dtdate": self.serve_date,
            "myaction": self.action,
        }
        if self.school_name is not None:
            params["sName"] = self.school_name
        if self.na_flag is not None:
            params["naFlag"] = self.na_flag
        return params

    def legacy_form(self) -> str:
        """Return the form body expected by the legacy menu.php endpoint."""
        return (
            f'serve_date="{self.serve_date}"'
            f"&location_num={self.hall.location_num}"
            "&foodproDB=true"
        )


def format_serve_date(when: date) -> str:
    """Format the calendar day of ``when`` as MM/DD/YYYY."""
    return f"{when.month:02d}/{when.day:02d}/{when.year:04d}"


def build_menu_request(hall: DiningHall, when: date) -> MenuRequest:
    """Build a request for the hall's menu on the calendar day of ``when``.

    Datetimes are read in their own time zone; no conversion happens here.
    """
    return MenuRequest(hall=hall, serve_date=format_serve_date(when))
