"""Housing transaction counts scraped from the Beijing housing authority page."""

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from bs4 import BeautifulSoup

_INTEGER = re.compile(r"[+-]?[0-9]+")

_FORWARD = (
    "div[class='cont_top_wrap'] td[id='ess_ctr5115_ContentPane'] "
    "span[id='ess_ctr5115_FDCJY_HouseTransactionStatist_{}']"
)
_SECOND = (
    "td[id='ess_ctr5112_ContentPane'] div[id='ess_ctr5112_ModuleContent'] "
    "span[id='ess_ctr5112_FDCJY_SignOnlineStatistics_{}']"
)

# (section, field, selector, label) in the order the page is read.
_FIELDS = (
    ("forward_delivery_house", "total_selling_count", _FORWARD.format("totalCount"), "当前可售期房总套数"),
    ("forward_delivery_house", "residence_selling_count", _FORWARD.format("residenceCount"), "当前可售住宅套数"),
    ("forward_delivery_house", "total_signed_count", _FORWARD.format("totalCount4"), "期房网上签约总套数"),
    ("forward_delivery_house", "residence_signed_count", _FORWARD.format("residenceCount4"), "期房网上签约住宅套数"),
    ("second_hand_house", "total_selling_count", _SECOND.format("totalCount"), "当前可售存量房总套数"),
    ("second_hand_house", "residence_selling_count", _SECOND.format("residenceCount"), "当前可售存量房住宅套数"),
    ("second_hand_house", "total_signed_count", _SECOND.format("totalCount4"), "存量房网上签约总套数"),
    ("second_hand_house", "residence_signed_count", _SECOND.format("residenceCount4"), "存量房网上签约住宅套数"),
    ("second_hand_house", "new_published_count", _SECOND.format("totalCount2"), "新发布房源总套数"),
    ("second_hand_house", "new_published_residence_count", _SECOND.format("residenceCount2"), "新发布房源住宅套数"),
    ("ready_house", "residence_selling_count", _FORWARD.format("residenceCount6"), "当前可售现房住宅套数"),
    ("ready_house", "total_signed_count", _FORWARD.format("totalCount8"), "现房网上签约总套数"),
    ("ready_house", "residence_signed_count", _FORWARD.format("residenceCount8"), "现房网上签约住宅套数"),
    ("month_house", "new_published_residence_count", _FORWARD.format("residenceCount2"), "月批准预售许可证的住宅套数"),
    ("month_house", "total_signed_count", _SECOND.format("totalCount3"), "月度存量房网上签约总套数"),
    ("month_house", "residence_signed_count", _SECOND.format("residenceCount3"), "月度存量房网上签约住宅套数"),
)


@dataclass
class HouseDayCount:
    """Counts published for one day."""

    total_selling_count: int = 0
    residence_selling_count: int = 0
    total_signed_count: int = 0
    residence_signed_count: int = 0
    new_published_count: int = 0
    new_published_residence_count: int = 0


@dataclass
class HouseMonthCount:
    """Counts published for the previous month."""

    total_signed_count: int = 0
    residence_signed_count: int = 0
    new_published_residence_count: int = 0


@dataclass
class HouseCount:
    forward_delivery_house: HouseDayCount = field(default_factory=HouseDayCount)
    ready_house: HouseDayCount = field(default_factory=HouseDayCount)
    second_hand_house: HouseDayCount = field(default_factory=HouseDayCount)
    month_house: HouseMonthCount = field(default_factory=HouseMonthCount)


def last_day(now=None) -> str:
    """Return the date 24 hours before now, e.g. "2015-10-27", without zero padding."""
    t = (now if now is not None else datetime.now()) - timedelta(hours=24)
    return f"{t.year}-{t.month}-{t.day}"


def last_month(now=None) -> str:
    """Return the month before now, e.g. "2015-10"."""
    t = now if now is not None else datetime.now()
    year, month = t.year, t.month - 1
    if month == 0:
        year, month = year - 1, 12
    return f"{year}-{month:02d}"


def _to_int(text: str) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise ValueError(f"invalid syntax: {text!r}")
    return int(text)


class BeijingHouseParser:
    """Extracts house counts from the Beijing housing authority page."""

    def __init__(self):
        self.city_name = "beijing"
        self.url = "http://www.bjjs.gov.cn/tabid/2167/default.aspx"
        self.house_count = HouseCount()

    def name(self) -> str:
        return self.city_name

    def parse(self, html) -> HouseCount:
        """Fill house_count from the page; raise ValueError on a missing or malformed number."""
        soup = BeautifulSoup(html, "html.parser")
        for section, attr, selector, label in _FIELDS:
            text = "".join(element.get_text() for element in soup.select(selector))
            try:
                value = _to_int(text)
            except ValueError as exc:
                raise ValueError(f"{self.city_name} {label} 错误：{exc}") from exc
            setattr(getattr(self.house_count, section), attr, value)
        return self.house_count

    def to_json(self, readable, now=None) -> str:
        """Render the counts keyed by yesterday's date and last month."""
        hc = self.house_count
        forward = {
            "当前可售期房总套数": hc.forward_delivery_house.total_selling_count,
            "当前可售住宅套数": hc.forward_delivery_house.residence_selling_count,
            "期房网上签约总套数": hc.forward_delivery_house.total_signed_count,
            "期房网上签约住宅套数": hc.forward_delivery_house.residence_signed_count,
        }
        second = {
            "当前可售存量房总套数": hc.second_hand_house.total_selling_count,
            "当前可售存量房住宅套数": hc.second_hand_house.residence_selling_count,
            "存量房网上签约总套数": hc.second_hand_house.total_signed_count,
            "存量房网上签约住宅套数": hc.second_hand_house.residence_signed_count,
            "新发布房源总套数": hc.second_hand_house.new_published_count,
            "新发布房源住宅套数": hc.second_hand_house.new_published_residence_count,
        }
        ready = {
            "当前可售现房住宅套数": hc.ready_house.residence_selling_count,
            "现房网上签约总套数": hc.ready_house.total_signed_count,
            "现房网上签约住宅套数": hc.ready_house.residence_signed_count,
        }
        month = {
            "月批准预售许可证的住宅套数": hc.month_house.new_published_residence_count,
            "月度存量房网上签约总套数": hc.month_house.total_signed_count,
            "月度存量房网上签约住宅套数": hc.month_house.residence_signed_count,
        }
        result = {
            last_day(now): {"期房": forward, "存量房": second, "现房": ready},
        }
        result[last_month(now)] = month
        if readable:
            return json.dumps(result, ensure_ascii=False, sort_keys=True, indent=2)
        return json.dumps(result, ensure_ascii=False, sort_keys=True, separators=(",", ":"))