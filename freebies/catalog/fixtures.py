from __future__ import annotations

from typing import Any

_STANDARD_CUSTOM_ATTRIBUTES: list[dict[str, str]] = [
    {"key": "autoGeneratedPrice", "value": "false"},
    {"key": "isManuallySetViewableDate", "value": "true"},
    {"key": "isPromotionalContentUsed", "value": "false"},
    {"key": "isManuallySetPCReleaseDate", "value": "true"},
    {"key": "isBlockchainUsed", "value": "false"},
]
_BASE_GAME_CATEGORIES: list[dict[str, str]] = [
    {"path": "freegames"},
    {"path": "games"},
    {"path": "games/edition"},
    {"path": "games/edition/base"},
]

CHUCHEL: dict[str, Any] = {
    "title": "CHUCHEL",
    "id": "70ec5e706b404d378762042f029b46ef",
    "namespace": "092bbf0d7e2449c08271cae2fb791cf2",
    "description": (
        "CHUCHEL is a comedy adventure game from the creators of Machinarium, Botanicula and "
        "Samorost. Join the hairy hero Chuchel and his rival Kekel as they will be facing "
        "numerous puzzles and challenges in their quest to retrieve the precious cherry!"
    ),
    "effectiveDate": "2023-10-31T12:00:00.000Z",
    "offerType": "BASE_GAME",
    "expiryDate": None,
    "viewableDate": "2023-09-27T10:00:00.000Z",
    "status": "ACTIVE",
    "isCodeRedemptionOnly": False,
    "keyImages": [
        {
            "type": "OfferImageWide",
            "url": "https://cdn1.epicgames.com/spt-assets/6109686c842a4bd9b9ef8959ec4d97c6/chuchel-17x3l.jpg",
        },
        {
            "type": "OfferImageTall",
            "url": "https://cdn1.epicgames.com/spt-assets/6109686c842a4bd9b9ef8959ec4d97c6/chuchel-1731b.png",
        },
        {
            "type": "Thumbnail",
            "url": "https://cdn1.epicgames.com/spt-assets/6109686c842a4bd9b9ef8959ec4d97c6/chuchel-1731b.png",
        },
    ],
    "seller": {"id": "o-9yx3b8bxbr9g2r3z7ahpmgphp2d5kh", "name": "Amanita Design s.r.o."},
    "productSlug": None,
    "urlSlug": "chuchel-203808",
    "url": None,
    "items": [{"id": "ec1df3ef0b634ea3a9c8f9cdac39dd70", "namespace": "092bbf0d7e2449c08271cae2fb791cf2"}],
    "customAttributes": _STANDARD_CUSTOM_ATTRIBUTES,
    "categories": _BASE_GAME_CATEGORIES,
    "tags": [{"id": tag_id} for tag_id in ("1298", "21894", "1370", "9547", "1117", "1263")],
    "catalogNs": {"mappings": [{"pageSlug": "chuchel-203808", "pageType": "productHome"}]},
    "offerMappings": [{"pageSlug": "chuchel-203808", "pageType": "productHome"}],
    "price": {
        "totalPrice": {
            "discountPrice": 0,
            "originalPrice": 999,
            "voucherDiscount": 0,
            "discount": 999,
            "currencyCode": "USD",
            "currencyInfo": {"decimals": 2},
            "fmtPrice": {"originalPrice": "$9.99", "discountPrice": "0", "intermediatePrice": "0"},
        },
        "lineOffers": [
            {
                "appliedRules": [
                    {
                        "id": "954c243db81f46ce995943823a2fcaf5",
                        "endDate": "2025-05-01T15:00:00.000Z",
                        "discountSetting": {"discountType": "PERCENTAGE"},
                    }
                ]
            }
        ],
    },
    "promotions": {
        "promotionalOffers": [
            {
                "promotionalOffers": [
                    {
                        "startDate": "2025-04-24T15:00:00.000Z",
                        "endDate": "2025-05-01T15:00:00.000Z",
                        "discountSetting": {"discountType": "PERCENTAGE", "discountPercentage": 0},
                    }
                ]
            }
        ],
        "upcomingPromotionalOffers": [],
    },
}

ALBION_WELCOME_GIFT: dict[str, Any] = {
    "title": "Albion Online Free Welcome Gift",
    "id": "3a91372e417f46eca3f5dffe4c33d961",
    "namespace": "72520902fc594621b6daa5a6217b4ee7",
    "description": (
        "Everything you need to get off to the best start, including the Knight Adventurer "
        "vanity bundle, the Mistbison mount skin, 3 days Premium, 250 Learning Points, and much more."
    ),
    "effectiveDate": "2025-04-24T15:00:00.000Z",
    "offerType": "ADD_ON",
    "expiryDate": "2025-05-01T15:00:00.000Z",
    "viewableDate": "2025-04-16T11:00:00.000Z",
    "status": "ACTIVE",
    "isCodeRedemptionOnly": False,
    "keyImages": [
        {
            "type": "OfferImageWide",
            "url": "https://cdn1.epicgames.com/spt-assets/92837229023341268267ff64cae425a5/albion-online-4pxzl.png",
        },
        {
            "type": "OfferImageTall",
            "url": "https://cdn1.epicgames.com/spt-assets/92837229023341268267ff64cae425a5/albion-online-1rgrs.png",
        },
        {
            "type": "Thumbnail",
            "url": "https://cdn1.epicgames.com/spt-assets/92837229023341268267ff64cae425a5/albion-online-1rgrs.png",
        },
        {
            "type": "featuredMedia",
            "url": "https://cdn1.epicgames.com/spt-assets/92837229023341268267ff64cae425a5/albion-online-do8tm.png",
        },
    ],
    "seller": {"id": "o-bqgxsskl6psb955j4pwt52muzt69yz", "name": "Sandbox Interactive GmbH"},
    "productSlug": None,
    "urlSlug": "albion-online-epic-launch-promo-bundle-fd0e2a",
    "url": None,
    "items": [{"id": "80714d52512a4f659abbc71e780a7bea", "namespace": "72520902fc594621b6daa5a6217b4ee7"}],
    "customAttributes": [
        {"key": "isManuallySetRefundableType", "value": "true"},
        {"key": "autoGeneratedPrice", "value": "false"},
        {"key": "isManuallySetViewableDate", "value": "true"},
        {"key": "isPromotionalContentUsed", "value": "false"},
        {"key": "isManuallySetPCReleaseDate", "value": "false"},
        {"key": "isBlockchainUsed", "value": "false"},
    ],
    "categories": [{"path": "addons"}, {"path": "freegames"}, {"path": "addons/durable"}],
    "tags": [
        {"id": tag_id}
        for tag_id in ("29088", "1287", "1367", "19847", "22775", "22776", "9547", "1117", "9549", "10719")
    ],
    "catalogNs": {"mappings": [{"pageSlug": "albion-online-7eb24d", "pageType": "productHome"}]},
    "offerMappings": [{"pageSlug": "albion-online-epic-launch-promo-bundle-fd0e2a", "pageType": "offer"}],
    "price": {
        "totalPrice": {
            "discountPrice": 0,
            "originalPrice": 0,
            "voucherDiscount": 0,
            "discount": 0,
            "currencyCode": "USD",
            "currencyInfo": {"decimals": 2},
            "fmtPrice": {"originalPrice": "0", "discountPrice": "0", "intermediatePrice": "0"},
        },
        "lineOffers": [{"appliedRules": []}],
    },
    "promotions": {
        "promotionalOffers": [
            {
                "promotionalOffers": [
                    {
                        "startDate": "2025-04-24T15:00:00.000Z",
                        "endDate": "2025-05-01T15:00:00.000Z",
                        "discountSetting": {"discountType": "PERCENTAGE", "discountPercentage": 0},
                    }
                ]
            }
        ],
        "upcomingPromotionalOffers": [],
    },
}

SUPER_SPACE_CLUB: dict[str, Any] = {
    "title": "Super Space Club",
    "id": "f2946e78792f48a69c7c030f03e7fb42",
    "namespace": "5d6924bd68114aab9e48f1ed17ce1883",
    "description": (
        "Super Space Club is a lo-fi arcade space shooter to chill to. Defend a vibrant galaxy as "
        "a club of misfit heroes and battle endless waves of spacecrafts to the tune of "
        "atmospheric beats. Outlast your enemies and vibe to the rhythm of the stars."
    ),
    "effectiveDate": "2025-01-23T18:00:00.000Z",
    "offerType": "BASE_GAME",
    "expiryDate": None,
    "viewableDate": "2025-01-23T18:00:00.000Z",
    "status": "ACTIVE",
    "isCodeRedemptionOnly": False,
    "keyImages": [
        {
            "type": "OfferImageWide",
            "url": "https://cdn1.epicgames.com/spt-assets/d23691af8c7d42729f66d929c8609676/super-space-club-t55ij.png",
        },
        {
            "type": "OfferImageTall",
            "url": "https://cdn1.epicgames.com/spt-assets/d23691af8c7d42729f66d929c8609676/super-space-club-1tl94.png",
        },
        {
            "type": "Thumbnail",
            "url": "https://cdn1.epicgames.com/spt-assets/d23691af8c7d42729f66d929c8609676/super-space-club-1tl94.png",
        },
    ],
    "seller": {"id": "o-w5juz4p54jnbqrtqfw5x65yd6p6lpx", "name": "GrahamOfLegend"},
    "productSlug": None,
    "urlSlug": "super-space-club-20adbe",
    "url": None,
    "items": [{"id": "36e7c8bc302246ea872ff8f7bcdae17c", "namespace": "5d6924bd68114aab9e48f1ed17ce1883"}],
    "customAttributes": _STANDARD_CUSTOM_ATTRIBUTES,
    "categories": _BASE_GAME_CATEGORIES,
    "tags": [{"id": tag_id} for tag_id in ("1216", "21894", "1210", "1370", "9547", "9549", "1263")],
    "catalogNs": {"mappings": [{"pageSlug": "super-space-club-20adbe", "pageType": "productHome"}]},
    "offerMappings": [{"pageSlug": "super-space-club-20adbe", "pageType": "productHome"}],
    "price": {
        "totalPrice": {
            "discountPrice": 1499,
            "originalPrice": 1499,
            "voucherDiscount": 0,
            "discount": 0,
            "currencyCode": "USD",
            "currencyInfo": {"decimals": 2},
            "fmtPrice": {
                "originalPrice": "$14.99",
                "discountPrice": "$14.99",
                "intermediatePrice": "$14.99",
            },
        },
        "lineOffers": [{"appliedRules": []}],
    },
    "promotions": {
        "promotionalOffers": [],
        "upcomingPromotionalOffers": [
            {
                "promotionalOffers": [
                    {
                        "startDate": "2025-05-01T15:00:00.000Z",
                        "endDate": "2025-05-08T15:00:00.000Z",
                        "discountSetting": {"discountType": "PERCENTAGE", "discountPercentage": 100},
                    }
                ]
            }
        ],
    },
}

FIXTURE_CATALOG: dict[str, list[dict[str, Any]]] = {
    "currentGames": [CHUCHEL, ALBION_WELCOME_GIFT],
    "nextGames": [SUPER_SPACE_CLUB],
}
