from tripglobe.editor.adapter import flatten_ai_itinerary

generated = {
    "title": "Tokyo weekend",
    "days": [
        {
            "day": 1,
            "activities": [
                {
                    "time": "09:00",
                    "title": "Senso-ji Temple Visit",
                    "description": "Explore Tokyo's oldest temple in Asakusa district",
                    "location": {
                        "name": "Senso-ji Temple",
                        "coordinates": {"lat": 35.7148, "lng": 139.7967},
                    },
                },
                {"name": "Traditional Lunch", "startTime": "12:30", "endTime": "14:00"},
            ],
        },
        {
            "day": 2,
            "date": "2024-04-20",
            "activities": [{"title": "Tokyo National Museum", "location": "Ueno Park"}],
        },
    ],
}


def test_flatten_places_days_from_start_date():
    stops = flatten_ai_itinerary(generated, start_date="2024-04-15")
    assert [s.title for s in stops] == ["Senso-ji Temple Visit", "Traditional Lunch", "Tokyo National Museum"]
    assert [s.date for s in stops] == ["2024-04-15", "2024-04-15", "2024-04-20"]


def test_flatten_maps_activity_fields():
    temple, lunch, museum = flatten_ai_itinerary(generated, start_date="2024-04-15")
    assert temple.startTime == "09:00"
    assert temple.destination == "Senso-ji Temple"
    assert (temple.location.lat, temple.location.lng) == (35.7148, 139.7967)
    assert lunch.endTime == "14:00"
    assert lunch.destination == "Traditional Lunch"
    assert museum.destination == "Ueno Park"
    assert museum.location is None
    assert len({temple.id, lunch.id, museum.id}) == 3


def test_flatten_without_any_date_leaves_stops_undated():
    stops = flatten_ai_itinerary({"days": [{"activities": [{"title": "Walk"}]}]})
    assert stops[0].date is None


def test_flatten_skips_malformed_days():
    assert flatten_ai_itinerary({"days": ["oops", {"day": 1, "activities": []}]}, "2024-04-15") == []


def test_flatten_skips_activities_that_are_not_objects():
    stops = flatten_ai_itinerary(
        {"days": [{"day": 1, "activities": ["Visit museum", {"title": "Harbour cruise"}, None]}]},
        "2024-01-01",
    )
    assert [(s.title, s.date) for s in stops] == [("Harbour cruise", "2024-01-01")]


def test_flatten_falls_back_to_position_for_text_day_labels():
    stops = flatten_ai_itinerary(
        {"days": [
            {"day": "Day 1", "activities": [{"title": "Arrive"}]},
            {"day": "Day 2", "activities": [{"title": "Hike"}]},
        ]},
        "2024-01-01",
    )
    assert [s.date for s in stops] == ["2024-01-01", "2024-01-02"]


def test_flatten_ignores_list_coordinates():
    stops = flatten_ai_itinerary(
        {"days": [{"day": 1, "activities": [
            {"title": "Fort", "location": {"name": "Old Fort", "coordinates": [12.9, 77.5]}},
        ]}]},
        "2024-01-01",
    )
    assert stops[0].location is None
    assert stops[0].destination == "Old Fort"
