"""
Static address book used in place of a real reverse-geocoding backend.

Every coordinate maps to one of a fixed set of US addresses. The choice is a
stable function of the coordinate rounded to four decimal places, so the same
car location always resolves to the same address.
"""

import zlib
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Address:
    address: str
    city: str
    state: str
    zip: str

    def to_dict(self) -> dict:
        return asdict(self)


ADDRESSES: tuple[Address, ...] = (
    Address("777 Brockton Avenue", "Abington", "MA", "02351"),
    Address("30 Memorial Drive", "Avon", "MA", "02322"),
    Address("250 Hartford Avenue", "Bellingham", "MA", "02019"),
    Address("700 Oak Street", "Brockton", "MA", "02301"),
    Address("66-4 Parkhurst Rd", "Chelmsford", "MA", "01824"),
    Address("591 Memorial Dr", "Chicopee", "MA", "01020"),
    Address("55 Brooksby Village Way", "Danvers", "MA", "01923"),
    Address("137 Teaticket Hwy", "East Falmouth", "MA", "02536"),
    Address("42 Fairhaven Commons Way", "Fairhaven", "MA", "02719"),
    Address("374 William S Canning Blvd", "Fall River", "MA", "02721"),
    Address("121 Worcester Rd", "Framingham", "MA", "01701"),
    Address("677 Timpany Blvd", "Gardner", "MA", "01440"),
    Address("337 Russell St", "Hadley", "MA", "01035"),
    Address("295 Plymouth Street", "Halifax", "MA", "02338"),
    Address("1775 Washington St", "Hanover", "MA", "02339"),
    Address("280 Washington Street", "Hudson", "MA", "01749"),
    Address("20 Soojian Dr", "Leicester", "MA", "01524"),
    Address("11 Jungle Road", "Leominster", "MA", "01453"),
    Address("301 Massachusetts Ave", "Lunenburg", "MA", "01462"),
    Address("780 Lynnway", "Lynn", "MA", "01905"),
)


def _coordinate_key(lat: float, lon: float) -> bytes:
    return f"{round(lat, 4):.4f},{round(lon, 4):.4f}".encode()


def lookup(lat: float, lon: float) -> Address:
    """Return the address for a coordinate."""
    index = zlib.crc32(_coordinate_key(lat, lon)) % len(ADDRESSES)
    return ADDRESSES[index]
