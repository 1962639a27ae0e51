from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class KeyImage(CatalogModel):
    type: str
    url: str


class Seller(CatalogModel):
    id: str = ""
    name: str = ""


class PageMapping(CatalogModel):
    page_slug: str | None = Field(default=None, alias="pageSlug")
    page_type: str | None = Field(default=None, alias="pageType")


class CatalogNs(CatalogModel):
    mappings: tuple[PageMapping, ...] | None = None


class Category(CatalogModel):
    path: str


class Tag(CatalogModel):
    id: str


class Item(CatalogModel):
    id: str
    namespace: str


class CustomAttribute(CatalogModel):
    key: str
    value: str


class CurrencyInfo(CatalogModel):
    decimals: int = 2


class FormattedPrice(CatalogModel):
    original_price: str = Field(default="", alias="originalPrice")
    discount_price: str = Field(default="", alias="discountPrice")
    intermediate_price: str = Field(default="", alias="intermediatePrice")


class TotalPrice(CatalogModel):
    discount_price: int | None = Field(default=None, alias="discountPrice")
    original_price: int | None = Field(default=None, alias="originalPrice")
    voucher_discount: int = Field(default=0, alias="voucherDiscount")
    discount: int = 0
    currency_code: str = Field(default="USD", alias="currencyCode")
    currency_info: CurrencyInfo = Field(default_factory=CurrencyInfo, alias="currencyInfo")
    fmt_price: FormattedPrice = Field(default_factory=FormattedPrice, alias="fmtPrice")


class DiscountSetting(CatalogModel):
    discount_type: str = Field(default="", alias="discountType")
    discount_percentage: int | None = Field(default=None, alias="discountPercentage")


class AppliedRule(CatalogModel):
    id: str
    end_date: str | None = Field(default=None, alias="endDate")
    discount_setting: DiscountSetting = Field(default_factory=DiscountSetting, alias="discountSetting")


class LineOffer(CatalogModel):
    applied_rules: tuple[AppliedRule, ...] = Field(default=(), alias="appliedRules")


class Price(CatalogModel):
    total_price: TotalPrice = Field(default_factory=TotalPrice, alias="totalPrice")
    line_offers: tuple[LineOffer, ...] = Field(default=(), alias="lineOffers")


class PromotionalInterval(CatalogModel):
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    discount_setting: DiscountSetting = Field(default_factory=DiscountSetting, alias="discountSetting")


class PromotionalOfferGroup(CatalogModel):
    promotional_offers: tuple[PromotionalInterval, ...] = Field(default=(), alias="promotionalOffers")

    @field_validator("promotional_offers", mode="before")
    @classmethod
    def _null_offers(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def first_interval(self) -> PromotionalInterval | None:
        return self.promotional_offers[0] if self.promotional_offers else None


class Promotions(CatalogModel):
    promotional_offers: tuple[PromotionalOfferGroup, ...] = Field(default=(), alias="promotionalOffers")
    upcoming_promotional_offers: tuple[PromotionalOfferGroup, ...] = Field(
        default=(),
        alias="upcomingPromotionalOffers",
    )

    @field_validator("promotional_offers", "upcoming_promotional_offers", mode="before")
    @classmethod
    def _null_groups(cls, value: Any) -> Any:
        return () if value is None else value


class Offer(CatalogModel):
    id: str
    namespace: str = ""
    title: str
    description: str = ""
    effective_date: str | None = Field(default=None, alias="effectiveDate")
    offer_type: str = Field(default="", alias="offerType")
    expiry_date: str | None = Field(default=None, alias="expiryDate")
    viewable_date: str | None = Field(default=None, alias="viewableDate")
    status: str = ""
    is_code_redemption_only: bool = Field(default=False, alias="isCodeRedemptionOnly")
    key_images: tuple[KeyImage, ...] = Field(default=(), alias="keyImages")
    seller: Seller = Field(default_factory=Seller)
    product_slug: str | None = Field(default=None, alias="productSlug")
    url_slug: str | None = Field(default=None, alias="urlSlug")
    url: str | None = None
    items: tuple[Item, ...] = ()
    custom_attributes: tuple[CustomAttribute, ...] = Field(default=(), alias="customAttributes")
    categories: tuple[Category, ...] = ()
    tags: tuple[Tag, ...] = ()
    catalog_ns: CatalogNs = Field(default_factory=CatalogNs, alias="catalogNs")
    offer_mappings: tuple[PageMapping, ...] | None = Field(default=None, alias="offerMappings")
    price: Price = Field(default_factory=Price)
    promotions: Promotions | None = None

    @field_validator(
        "key_images",
        "items",
        "custom_attributes",
        "categories",
        "tags",
        "seller",
        "catalog_ns",
        "price",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        if info.field_name in {"seller", "catalog_ns", "price"}:
            return {}
        return ()

    @property
    def offer_mapping_slug(self) -> str | None:
        if not self.offer_mappings:
            return None
        return self.offer_mappings[0].page_slug

    @property
    def catalog_slug(self) -> str | None:
        if not self.catalog_ns.mappings:
            return None
        return self.catalog_ns.mappings[0].page_slug

    @property
    def current_intervals(self) -> tuple[PromotionalInterval, ...]:
        if self.promotions is None:
            return ()
        return _flatten(self.promotions.promotional_offers)

    @property
    def upcoming_intervals(self) -> tuple[PromotionalInterval, ...]:
        if self.promotions is None:
            return ()
        return _flatten(self.promotions.upcoming_promotional_offers)

    @property
    def upcoming_groups(self) -> tuple[PromotionalOfferGroup, ...]:
        if self.promotions is None:
            return ()
        return self.promotions.upcoming_promotional_offers

    @property
    def current_interval(self) -> PromotionalInterval | None:
        if self.promotions is None or not self.promotions.promotional_offers:
            return None
        return self.promotions.promotional_offers[0].first_interval

    @property
    def upcoming_interval(self) -> PromotionalInterval | None:
        if not self.upcoming_groups:
            return None
        return self.upcoming_groups[0].first_interval


def _flatten(groups: tuple[PromotionalOfferGroup, ...]) -> tuple[PromotionalInterval, ...]:
    return tuple(interval for group in groups for interval in group.promotional_offers)


def parse_offers(raw_offers: list[dict[str, Any]] | None) -> tuple[Offer, ...]:
    return tuple(Offer.model_validate(raw) for raw in raw_offers or ())


@dataclass(frozen=True, slots=True)
class CatalogFeed:
    current_games: tuple[Offer, ...]
    next_games: tuple[Offer, ...]

    @property
    def all_games(self) -> tuple[Offer, ...]:
        return self.current_games + self.next_games

    @classmethod
    def empty(cls) -> CatalogFeed:
        return cls(current_games=(), next_games=())
