"""Built-in geography tables: city coordinates, city countries and country ranks."""

from __future__ import annotations

CITY_COORDINATES: dict[str, tuple[float, float]] = {
    # Thailand
    "Bangkok": (13.7563, 100.5018),
    "Chiang Mai": (18.7883, 98.9853),
    "Phuket": (7.8804, 98.3923),
    "Krabi": (8.0863, 98.9063),
    "Koh Samui": (9.5120, 100.0134),
    "Ayutthaya": (14.3532, 100.5685),
    "Pai": (19.3622, 98.4411),
    "Chiang Rai": (19.9105, 99.8406),
    "Koh Phi Phi": (7.7407, 98.7784),
    "Koh Lanta": (7.6500, 99.0833),
    "Koh Tao": (10.0956, 99.8374),
    "Hua Hin": (12.5684, 99.9577),
    "Koh Chang": (12.0559, 102.3426),
    "Sukhothai": (17.0074, 99.8226),
    "Kanchanaburi": (14.0041, 99.5483),
    "Koh Phangan": (9.7500, 100.0333),
    # Vietnam
    "Hanoi": (21.0285, 105.8542),
    "Ho Chi Minh City": (10.8231, 106.6297),
    "Hoi An": (15.8801, 108.3380),
    "Da Nang": (16.0544, 108.2022),
    "Hue": (16.4637, 107.5909),
    "Nha Trang": (12.2388, 109.1967),
    "Ha Long Bay": (20.9101, 107.1839),
    "Sapa": (22.3364, 103.8438),
    "Ninh Binh": (20.2539, 105.9750),
    # Japan
    "Tokyo": (35.6762, 139.6503),
    "Kyoto": (35.0116, 135.7681),
    "Osaka": (34.6937, 135.5023),
    "Hiroshima": (34.3853, 132.4553),
    "Nara": (34.6851, 135.8050),
    "Hakone": (35.2324, 139.1069),
    "Nikko": (36.7198, 139.6982),
    "Fukuoka": (33.5904, 130.4017),
    # Hawaii
    "Honolulu": (21.3069, -157.8583),
    "Maui": (20.7984, -156.3319),
    "Kauai": (22.0964, -159.5261),
    "Big Island": (19.5429, -155.6659),
    "Waikiki": (21.2793, -157.8292),
    # Turkey
    "Istanbul": (41.0082, 28.9784),
    "Cappadocia": (38.6431, 34.8289),
    "Antalya": (36.8969, 30.7133),
    "Bodrum": (37.0344, 27.4305),
    "Ephesus": (37.9411, 27.3420),
    "Pamukkale": (37.9137, 29.1187),
    "Izmir": (38.4237, 27.1428),
    # Spain
    "Barcelona": (41.3874, 2.1686),
    "Madrid": (40.4168, -3.7038),
    "Seville": (37.3891, -5.9845),
    "Granada": (37.1773, -3.5986),
    "Valencia": (39.4699, -0.3763),
    "San Sebastian": (43.3183, -1.9812),
    "Bilbao": (43.2630, -2.9350),
    "Malaga": (36.7213, -4.4214),
    # Portugal
    "Lisbon": (38.7223, -9.1393),
    "Porto": (41.1579, -8.6291),
    "Lagos": (37.1028, -8.6730),
    "Faro": (37.0194, -7.9322),
    "Sintra": (38.8029, -9.3817),
    # France
    "Paris": (48.8566, 2.3522),
    "Nice": (43.7102, 7.2620),
    "Lyon": (45.7640, 4.8357),
    "Marseille": (43.2965, 5.3698),
    # Italy
    "Rome": (41.9028, 12.4964),
    "Florence": (43.7696, 11.2558),
    "Venice": (45.4408, 12.3155),
    "Milan": (45.4642, 9.1900),
    "Naples": (40.8518, 14.2681),
    "Amalfi": (40.6340, 14.6027),
    # Greece
    "Athens": (37.9838, 23.7275),
    "Santorini": (36.3932, 25.4615),
    "Mykonos": (37.4467, 25.3289),
    # Connection hubs
    "London": (51.5074, -0.1278),
    "Amsterdam": (52.3676, 4.9041),
    "Seoul": (37.5665, 126.9780),
    "Taipei": (25.0330, 121.5654),
    "Hong Kong": (22.3193, 114.1694),
    "Singapore": (1.3521, 103.8198),
    "Seattle": (47.6062, -122.3321),
    # Canada (home)
    "Kelowna": (49.8880, -119.4960),
    "Vancouver": (49.2827, -123.1207),
    "Calgary": (51.0447, -114.0719),
    "Toronto": (43.6532, -79.3832),
}

CITY_COUNTRIES: dict[str, str] = {
    **{
        city: "Thailand"
        for city in (
            "Bangkok", "Chiang Mai", "Phuket", "Krabi", "Koh Samui", "Ayutthaya", "Pai", "Chiang Rai",
            "Koh Phi Phi", "Koh Lanta", "Koh Tao", "Hua Hin", "Koh Chang", "Sukhothai", "Kanchanaburi",
            "Koh Phangan",
        )
    },
    **{
        city: "Vietnam"
        for city in (
            "Hanoi", "Ho Chi Minh City", "Hoi An", "Da Nang", "Hue", "Nha Trang", "Ha Long Bay", "Sapa",
            "Ninh Binh",
        )
    },
    **{
        city: "Japan"
        for city in ("Tokyo", "Kyoto", "Osaka", "Hiroshima", "Nara", "Hakone", "Nikko", "Fukuoka")
    },
    **{city: "Hawaii" for city in ("Honolulu", "Maui", "Kauai", "Big Island", "Waikiki")},
    **{
        city: "Turkey"
        for city in ("Istanbul", "Cappadocia", "Antalya", "Bodrum", "Ephesus", "Pamukkale", "Izmir")
    },
    **{
        city: "Spain"
        for city in (
            "Barcelona", "Madrid", "Seville", "Granada", "Valencia", "San Sebastian", "Bilbao", "Malaga",
        )
    },
    **{city: "Portugal" for city in ("Lisbon", "Porto", "Lagos", "Faro", "Sintra")},
    **{city: "France" for city in ("Paris", "Nice", "Lyon", "Marseille")},
    **{city: "Italy" for city in ("Rome", "Florence", "Venice", "Milan", "Naples", "Amalfi")},
    **{city: "Greece" for city in ("Athens", "Santorini", "Mykonos")},
    "London": "United Kingdom",
    "Amsterdam": "Netherlands",
    "Seoul": "South Korea",
    "Taipei": "Taiwan",
    "Hong Kong": "Hong Kong",
    "Singapore": "Singapore",
    "Seattle": "United States",
    **{city: "Canada" for city in ("Kelowna", "Vancouver", "Calgary", "Toronto")},
}

# Country names a city record may carry as a tag.
DESTINATION_COUNTRIES: tuple[str, ...] = (
    "Thailand", "Vietnam", "Japan", "Indonesia", "Bali", "South Korea", "China", "Taiwan", "Hong Kong",
    "Singapore", "Malaysia", "Cambodia", "Laos", "Myanmar", "Philippines", "India", "Sri Lanka", "Nepal",
    "Hawaii", "United States", "Mexico", "Canada", "Costa Rica", "Peru", "Argentina", "Brazil", "Chile",
    "Colombia", "Turkey", "Greece", "Italy", "Spain", "Portugal", "France", "Germany", "Netherlands",
    "Switzerland", "Austria", "Croatia", "United Kingdom", "Ireland", "Iceland", "Morocco", "Egypt",
    "South Africa", "Kenya", "Tanzania", "Australia", "New Zealand", "Fiji",
)

# Rank of each destination country by distance from a home country. Lower ranks are visited first.
COUNTRY_RANKS: dict[str, dict[str, int]] = {
    "Canada": {
        "Canada": 0,
        "United States": 1,
        "Hawaii": 2,
        "Mexico": 3,
        "Costa Rica": 4,
        "Japan": 5,
        "South Korea": 6,
        "Taiwan": 7,
        "China": 8,
        "Hong Kong": 8,
        "Philippines": 9,
        "Vietnam": 10,
        "Thailand": 11,
        "Laos": 11,
        "Cambodia": 11,
        "Myanmar": 12,
        "Malaysia": 12,
        "Singapore": 13,
        "Indonesia": 14,
        "Bali": 14,
        "Peru": 15,
        "Colombia": 15,
        "Brazil": 16,
        "Argentina": 17,
        "Chile": 17,
        "Iceland": 18,
        "Ireland": 19,
        "United Kingdom": 19,
        "France": 20,
        "Netherlands": 20,
        "Spain": 21,
        "Portugal": 21,
        "Switzerland": 22,
        "Germany": 22,
        "Austria": 22,
        "Italy": 23,
        "Croatia": 24,
        "Greece": 25,
        "Turkey": 26,
        "Morocco": 27,
        "Egypt": 28,
        "India": 29,
        "Nepal": 29,
        "Sri Lanka": 30,
        "Kenya": 31,
        "Tanzania": 31,
        "South Africa": 32,
        "Fiji": 33,
        "Australia": 34,
        "New Zealand": 35,
    },
}

# Major hub per country, used to seed a tour when hub-first sequencing is enabled.
COUNTRY_HUBS: dict[str, str] = {
    "Thailand": "Bangkok",
    "Vietnam": "Hanoi",
    "Japan": "Tokyo",
    "Hawaii": "Honolulu",
    "Turkey": "Istanbul",
    "Spain": "Madrid",
    "Portugal": "Lisbon",
    "France": "Paris",
    "Italy": "Rome",
    "Greece": "Athens",
    "Canada": "Vancouver",
}
