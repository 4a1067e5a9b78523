"""Curated transport options for popular city pairs.

Entries are keyed by origin then destination. A pair is looked up in both
directions, so only one direction needs to be listed unless the options
differ. ``minutes`` is the typical door-to-door duration used for ranking.
"""

from __future__ import annotations

from typing import Any

ROUTE_TRANSPORT: dict[str, dict[str, list[dict[str, Any]]]] = {
    # Thailand internal routes
    "Chiang Mai": {
        "Chiang Rai": [
            {"mode": "bus", "duration": "3h 45min", "minutes": 225, "price": "$8-15", "operator": "Green Bus", "frequency": "Every hour"},
            {"mode": "car", "duration": "2h 50min", "minutes": 170, "price": "$25-40", "notes": "184 km via Route 118"},
            {"mode": "taxi", "duration": "2h 50min", "minutes": 170, "price": "$80-100"},
            {"mode": "private", "duration": "3h", "minutes": 180, "price": "$120-150", "notes": "Door-to-door"},
        ],
        "Phuket": [
            {"mode": "flight", "duration": "2hr", "minutes": 120, "price": "$50-120", "operator": "Bangkok Airways, Thai Smile"},
            {"mode": "bus", "duration": "18-20hr", "minutes": 1140, "price": "$30-50", "notes": "Overnight bus"},
        ],
        "Pai": [
            {"mode": "bus", "duration": "3-4hr", "minutes": 210, "price": "$5-10", "notes": "762 curves", "frequency": "Every 2 hours"},
            {"mode": "private", "duration": "2.5hr", "minutes": 150, "price": "$60-80"},
        ],
    },
    "Bangkok": {
        "Chiang Mai": [
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$40-100", "operator": "Thai Airways, AirAsia", "frequency": "20+ daily"},
            {"mode": "train", "duration": "12-14hr", "minutes": 780, "price": "$20-60", "operator": "Thai Railways", "notes": "Sleeper train, scenic route"},
            {"mode": "bus", "duration": "10-11hr", "minutes": 660, "price": "$15-35", "operator": "NCA, Sombat Tour"},
        ],
        "Phuket": [
            {"mode": "flight", "duration": "1h 20min", "minutes": 80, "price": "$35-90", "operator": "Thai Airways, AirAsia", "frequency": "30+ daily"},
            {"mode": "bus", "duration": "12-13hr", "minutes": 750, "price": "$20-40", "operator": "Sombat Tour", "notes": "Overnight bus"},
        ],
        "Krabi": [
            {"mode": "flight", "duration": "1h 20min", "minutes": 80, "price": "$40-100", "operator": "AirAsia, Thai Smile"},
            {"mode": "bus", "duration": "11-12hr", "minutes": 690, "price": "$20-35", "notes": "Overnight"},
        ],
        "Koh Samui": [
            {"mode": "flight", "duration": "1hr", "minutes": 60, "price": "$80-200", "operator": "Bangkok Airways"},
            {"mode": "bus", "duration": "12hr + ferry", "minutes": 780, "price": "$25-40", "notes": "Bus to Surat Thani + ferry"},
        ],
        "Ayutthaya": [
            {"mode": "train", "duration": "1.5-2hr", "minutes": 105, "price": "$1-5", "operator": "Thai Railways", "frequency": "Every hour"},
            {"mode": "bus", "duration": "1.5hr", "minutes": 90, "price": "$3-5", "frequency": "Every 30 min"},
            {"mode": "taxi", "duration": "1hr", "minutes": 60, "price": "$35-50"},
        ],
        "Sukhothai": [
            {"mode": "flight", "duration": "1h 20min", "minutes": 80, "price": "$60-120", "operator": "Bangkok Airways"},
            {"mode": "bus", "duration": "6-7hr", "minutes": 390, "price": "$15-25", "notes": "Direct from Mo Chit"},
        ],
    },
    "Phuket": {
        "Krabi": [
            {"mode": "bus", "duration": "3hr", "minutes": 180, "price": "$8-15", "frequency": "Every 2 hours"},
            {"mode": "taxi", "duration": "2.5hr", "minutes": 150, "price": "$70-90"},
            {"mode": "ferry", "duration": "2hr", "minutes": 120, "price": "$25-40", "notes": "Scenic coastal route"},
        ],
        "Koh Phi Phi": [
            {"mode": "ferry", "duration": "2hr", "minutes": 120, "price": "$15-30", "operator": "Phi Phi Cruiser", "frequency": "3-4 daily"},
        ],
    },
    # Vietnam routes
    "Hanoi": {
        "Ha Long Bay": [
            {"mode": "bus", "duration": "3.5-4hr", "minutes": 225, "price": "$10-20", "notes": "Most tours include transport"},
            {"mode": "private", "duration": "2.5hr", "minutes": 150, "price": "$50-80"},
        ],
        "Hoi An": [
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$50-100", "operator": "Vietnam Airlines, VietJet", "notes": "Fly to Da Nang + 30min taxi"},
            {"mode": "train", "duration": "15-17hr", "minutes": 960, "price": "$30-60", "operator": "Vietnam Railways", "notes": "Sleeper train to Da Nang"},
            {"mode": "bus", "duration": "17-18hr", "minutes": 1050, "price": "$25-40", "notes": "Sleeper bus"},
        ],
        "Ho Chi Minh City": [
            {"mode": "flight", "duration": "2hr", "minutes": 120, "price": "$50-120", "operator": "Vietnam Airlines, VietJet", "frequency": "40+ daily"},
            {"mode": "train", "duration": "30-34hr", "minutes": 1920, "price": "$50-120", "operator": "Vietnam Railways", "notes": "Reunification Express"},
        ],
        "Sapa": [
            {"mode": "bus", "duration": "5-6hr", "minutes": 330, "price": "$15-25", "notes": "Sleeper bus or regular", "frequency": "Many daily"},
            {"mode": "train", "duration": "8hr + bus", "minutes": 540, "price": "$30-60", "notes": "Night train to Lao Cai + bus"},
        ],
    },
    "Ho Chi Minh City": {
        "Da Nang": [
            {"mode": "flight", "duration": "1h 20min", "minutes": 80, "price": "$40-90", "frequency": "20+ daily"},
            {"mode": "train", "duration": "15-17hr", "minutes": 960, "price": "$30-60", "notes": "Sleeper train"},
        ],
        "Nha Trang": [
            {"mode": "flight", "duration": "1hr", "minutes": 60, "price": "$40-80"},
            {"mode": "train", "duration": "6-8hr", "minutes": 420, "price": "$20-40", "notes": "Scenic coastal route"},
            {"mode": "bus", "duration": "8-9hr", "minutes": 510, "price": "$12-20"},
        ],
    },
    "Da Nang": {
        "Hoi An": [
            {"mode": "taxi", "duration": "30min", "minutes": 30, "price": "$15-20"},
            {"mode": "bus", "duration": "45min", "minutes": 45, "price": "$1-2", "frequency": "Every 20 min"},
            {"mode": "car", "duration": "30min", "minutes": 30, "price": "$5-10", "notes": "Motorbike rental"},
        ],
        "Hue": [
            {"mode": "train", "duration": "2.5hr", "minutes": 150, "price": "$8-15", "notes": "Scenic Hai Van Pass views"},
            {"mode": "bus", "duration": "3hr", "minutes": 180, "price": "$5-10"},
            {"mode": "private", "duration": "2hr", "minutes": 120, "price": "$40-60", "notes": "Stop at Hai Van Pass"},
        ],
    },
    # Japan routes
    "Tokyo": {
        "Kyoto": [
            {"mode": "train", "duration": "2h 15min", "minutes": 135, "price": "$120-150", "operator": "Shinkansen Nozomi", "notes": "JR Pass valid on Hikari"},
            {"mode": "bus", "duration": "7-8hr", "minutes": 450, "price": "$30-60", "notes": "Night bus available"},
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$80-150", "notes": "Fly to Osaka/Itami"},
        ],
        "Osaka": [
            {"mode": "train", "duration": "2h 30min", "minutes": 150, "price": "$120-150", "operator": "Shinkansen", "notes": "JR Pass valid"},
            {"mode": "flight", "duration": "1h 10min", "minutes": 70, "price": "$80-150"},
            {"mode": "bus", "duration": "8-9hr", "minutes": 510, "price": "$40-70", "notes": "Night bus"},
        ],
        "Hakone": [
            {"mode": "train", "duration": "1h 30min", "minutes": 90, "price": "$25-40", "operator": "Odakyu Romance Car"},
            {"mode": "bus", "duration": "2hr", "minutes": 120, "price": "$15-25"},
        ],
        "Nikko": [
            {"mode": "train", "duration": "2hr", "minutes": 120, "price": "$25-40", "operator": "Tobu Railway", "notes": "Get the Nikko Pass"},
        ],
        "Hiroshima": [
            {"mode": "train", "duration": "4hr", "minutes": 240, "price": "$170-200", "operator": "Shinkansen"},
            {"mode": "flight", "duration": "1h 25min", "minutes": 85, "price": "$100-200"},
        ],
    },
    "Kyoto": {
        "Osaka": [
            {"mode": "train", "duration": "15-30min", "minutes": 22, "price": "$5-15", "operator": "JR, Hankyu, Keihan", "frequency": "Every few minutes"},
        ],
        "Nara": [
            {"mode": "train", "duration": "45min", "minutes": 45, "price": "$6-10", "operator": "JR or Kintetsu"},
        ],
    },
    "Osaka": {
        "Hiroshima": [
            {"mode": "train", "duration": "1h 25min", "minutes": 85, "price": "$90-110", "operator": "Shinkansen Nozomi/Mizuho"},
            {"mode": "bus", "duration": "5-6hr", "minutes": 330, "price": "$30-50"},
        ],
        "Nara": [
            {"mode": "train", "duration": "30-50min", "minutes": 40, "price": "$5-10", "operator": "JR or Kintetsu"},
        ],
    },
    # Europe routes
    "Paris": {
        "Barcelona": [
            {"mode": "train", "duration": "6h 30min", "minutes": 390, "price": "$80-200", "operator": "TGV", "notes": "High-speed direct"},
            {"mode": "flight", "duration": "1h 50min", "minutes": 110, "price": "$50-150"},
            {"mode": "bus", "duration": "14-15hr", "minutes": 870, "price": "$30-60", "operator": "FlixBus"},
        ],
        "Amsterdam": [
            {"mode": "train", "duration": "3h 20min", "minutes": 200, "price": "$60-150", "operator": "Thalys"},
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$50-120"},
            {"mode": "bus", "duration": "7-8hr", "minutes": 450, "price": "$25-50"},
        ],
        "London": [
            {"mode": "train", "duration": "2h 15min", "minutes": 135, "price": "$80-200", "operator": "Eurostar", "notes": "City center to city center"},
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$50-150", "notes": "Add airport time"},
        ],
    },
    "Rome": {
        "Florence": [
            {"mode": "train", "duration": "1h 30min", "minutes": 90, "price": "$30-60", "operator": "Frecciarossa", "frequency": "Every 30 min"},
            {"mode": "bus", "duration": "3-4hr", "minutes": 210, "price": "$15-30"},
        ],
        "Venice": [
            {"mode": "train", "duration": "3h 45min", "minutes": 225, "price": "$50-100", "operator": "Frecciarossa"},
            {"mode": "flight", "duration": "1hr", "minutes": 60, "price": "$60-120"},
        ],
        "Naples": [
            {"mode": "train", "duration": "1h 10min", "minutes": 70, "price": "$20-50", "operator": "Frecciarossa", "frequency": "Every 30 min"},
        ],
        "Amalfi": [
            {"mode": "train", "duration": "3-4hr", "minutes": 210, "price": "$20-40", "notes": "Train to Salerno + bus/ferry"},
            {"mode": "private", "duration": "3hr", "minutes": 180, "price": "$150-250"},
        ],
    },
    "Barcelona": {
        "Madrid": [
            {"mode": "train", "duration": "2h 30min", "minutes": 150, "price": "$50-120", "operator": "AVE"},
            {"mode": "flight", "duration": "1h 15min", "minutes": 75, "price": "$40-100"},
            {"mode": "bus", "duration": "7-8hr", "minutes": 450, "price": "$25-50"},
        ],
    },
    # Hawaii inter-island and Japan connections
    "Honolulu": {
        "Maui": [
            {"mode": "flight", "duration": "30-40min", "minutes": 35, "price": "$80-150", "operator": "Hawaiian, Southwest", "frequency": "Many daily"},
        ],
        "Kauai": [
            {"mode": "flight", "duration": "30-40min", "minutes": 35, "price": "$80-150", "operator": "Hawaiian, Southwest"},
        ],
        "Big Island": [
            {"mode": "flight", "duration": "45min", "minutes": 45, "price": "$80-150", "operator": "Hawaiian, Southwest"},
        ],
        "Tokyo": [
            {"mode": "flight", "duration": "7hr", "minutes": 420, "price": "$500-900", "operator": "Hawaiian, Delta, JAL", "notes": "Nonstop flights available"},
        ],
        "Osaka": [
            {"mode": "flight", "duration": "8hr", "minutes": 480, "price": "$500-900", "operator": "Hawaiian, JAL", "notes": "Nonstop flights available"},
        ],
    },
    # Long-haul flights from Canada (Kelowna)
    "Kelowna": {
        "Tokyo": [
            {"mode": "flight", "duration": "12-14hr", "minutes": 780, "price": "$800-1500", "operator": "Air Canada, ANA, JAL", "notes": "1 stop via Vancouver", "stops": 1},
        ],
        "Osaka": [
            {"mode": "flight", "duration": "13-15hr", "minutes": 840, "price": "$850-1600", "operator": "Air Canada, ANA", "notes": "1 stop via Vancouver", "stops": 1},
        ],
        "Kyoto": [
            {"mode": "flight", "duration": "13-15hr", "minutes": 840, "price": "$850-1600", "operator": "Air Canada, ANA", "notes": "1 stop via Vancouver, fly to Osaka/KIX", "stops": 1},
        ],
        "Bangkok": [
            {"mode": "flight", "duration": "18-22hr", "minutes": 1200, "price": "$900-1800", "operator": "Air Canada, Thai Airways", "notes": "2 stops via Vancouver + hub", "stops": 2},
        ],
        "Chiang Mai": [
            {"mode": "flight", "duration": "20-24hr", "minutes": 1320, "price": "$950-1900", "operator": "Air Canada, Thai Airways", "notes": "2 stops via Vancouver + Bangkok", "stops": 2},
        ],
        "Phuket": [
            {"mode": "flight", "duration": "20-24hr", "minutes": 1320, "price": "$950-1900", "operator": "Air Canada, Thai Airways", "notes": "2 stops via Vancouver + Bangkok", "stops": 2},
        ],
        "Hanoi": [
            {"mode": "flight", "duration": "18-22hr", "minutes": 1200, "price": "$900-1700", "operator": "Air Canada, Vietnam Airlines", "notes": "2 stops via Vancouver + hub", "stops": 2},
        ],
        "Ho Chi Minh City": [
            {"mode": "flight", "duration": "18-22hr", "minutes": 1200, "price": "$900-1700", "operator": "Air Canada, Vietnam Airlines", "notes": "2 stops via Vancouver + hub", "stops": 2},
        ],
        "Honolulu": [
            {"mode": "flight", "duration": "8-10hr", "minutes": 540, "price": "$400-900", "operator": "WestJet, Air Canada", "notes": "1 stop via Vancouver or Seattle", "stops": 1},
        ],
        "Maui": [
            {"mode": "flight", "duration": "9-11hr", "minutes": 600, "price": "$450-950", "operator": "WestJet, Air Canada", "notes": "1 stop via Vancouver", "stops": 1},
        ],
    },
}

# Connection points offered for multi-stop legs, keyed by the (origin, destination) pair.
TRANSPORT_HUBS: dict[tuple[str, str], list[str]] = {
    ("Kelowna", "Tokyo"): ["Vancouver"],
    ("Kelowna", "Osaka"): ["Vancouver"],
    ("Kelowna", "Kyoto"): ["Vancouver", "Osaka"],
    ("Kelowna", "Bangkok"): ["Vancouver", "Tokyo", "Seoul", "Taipei", "Hong Kong"],
    ("Kelowna", "Chiang Mai"): ["Vancouver", "Bangkok"],
    ("Kelowna", "Phuket"): ["Vancouver", "Bangkok"],
    ("Kelowna", "Hanoi"): ["Vancouver", "Seoul", "Taipei"],
    ("Kelowna", "Ho Chi Minh City"): ["Vancouver", "Seoul", "Taipei"],
    ("Kelowna", "Honolulu"): ["Vancouver", "Seattle"],
    ("Kelowna", "Maui"): ["Vancouver"],
}
