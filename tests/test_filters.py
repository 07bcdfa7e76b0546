from tripglobe.editor.filters import filter_flights, filter_hotels, time_to_minutes, unique_airlines

flight_results = {
    "best_flights": [
        {
            "flights": [{"airline": "Emirates", "departure_airport": {"time": "2025-12-01 23:45"}}],
            "total_duration": 450,
            "price": 1245,
        },
        {
            "flights": [
                {"airline": "Malaysia Airlines", "departure_airport": {"time": "2025-12-01 14:30"}},
                {"airline": "Malaysia Airlines", "departure_airport": {"time": "2025-12-01 18:45"}},
            ],
            "total_duration": 690,
            "price": 890,
        },
    ],
    "other_flights": [
        {
            "flights": [{"airline": "Singapore Airlines", "departure_airport": {"time": "2025-12-01 08:00"}}],
            "total_duration": 2100,
            "price": 1500,
        },
    ],
}


def prices(flights):
    return [f["price"] for f in flights]


def test_time_to_minutes():
    assert time_to_minutes("2025-12-01 23:45") == 1425
    assert time_to_minutes("08:05") == 485
    assert time_to_minutes(None) == 0


def test_unique_airlines_sorted():
    assert unique_airlines(flight_results) == ["Emirates", "Malaysia Airlines", "Singapore Airlines"]


def test_default_filters_drop_only_overlong_flights():
    assert prices(filter_flights(flight_results)) == [1245, 890]


def test_departure_window():
    assert prices(filter_flights(flight_results, departure_window=(600, 1200), duration_range=(0, 5000))) == [890]


def test_airline_filter_applies_to_strict_subset():
    everyone = ["Emirates", "Malaysia Airlines", "Singapore Airlines"]
    assert prices(filter_flights(flight_results, airlines=["Malaysia Airlines"])) == [890]
    assert prices(filter_flights(flight_results, airlines=everyone)) == [1245, 890]
    assert prices(filter_flights(flight_results, airlines=[])) == [1245, 890]


def test_filter_hotels_by_price_and_stars():
    hotels = [
        {"name": "Grand", "hotel_class": "5-star hotel", "rate_per_night": {"extracted_lowest": 420}},
        {"name": "Budget", "hotel_class": "2-star hotel", "rate_per_night": {"extracted_lowest": 40}},
        {"name": "Pricey", "hotel_class": "4-star hotel", "rate_per_night": {"extracted_lowest": 1800}},
        {"name": "Unrated", "rate_per_night": {"extracted_lowest": 90}},
    ]
    assert [h["name"] for h in filter_hotels(hotels)] == ["Grand"]
    assert [h["name"] for h in filter_hotels(hotels, stars=[2, 0])] == ["Budget", "Unrated"]
    assert [h["name"] for h in filter_hotels(hotels, price_range=(0, 2000), stars=[4, 5])] == ["Grand", "Pricey"]
