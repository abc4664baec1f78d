import pytest
from fastapi.testclient import TestClient

from recurcal.api import call_api, endpoints, get_api_functions
from recurcal.api.state import ApiState
from recurcal.services.http import app


@pytest.fixture
def api(monkeypatch, context):
    state = ApiState(context=context)
    monkeypatch.setattr(endpoints, "api_state", state)
    return state


@pytest.fixture
def client(api):
    return TestClient(app)


WEEKLY_PAYLOAD = {
    "title": "Saturday talk",
    "date": "2025-10-04",
    "startTime": "10:00",
    "endTime": "11:00",
    "repeat": {"type": "weekly", "interval": 1, "endDate": "2025-10-31"},
    "notificationTime": 10,
}


class TestRegistry:
    """Test registration and schema generation for API functions."""

    def test_functions_are_registered(self):
        names = {func.name for func in get_api_functions()}
        assert {
            "list_events",
            "visible_events",
            "find_overlaps",
            "save_event",
            "delete_event",
            "group_members",
            "expand_repeat",
            "week_dates",
            "month_grid",
        } <= names

    def test_unknown_function(self):
        with pytest.raises(KeyError):
            call_api("no_such_function")

    def test_parameter_schema(self):
        function = next(func for func in get_api_functions() if func.name == "expand_repeat")
        schema = function.parameter_schema
        assert schema["required"] == ["start"]
        assert schema["properties"]["interval"] == {"type": "integer", "default": 1}


class TestCalendarFunctions:
    """Test the registered calendar functions end to end."""

    def test_save_and_list(self, api):
        created = call_api("save_event", event=WEEKLY_PAYLOAD)["events"]
        assert [event["date"] for event in created] == ["2025-10-04", "2025-10-11", "2025-10-18", "2025-10-25"]
        group_id = created[0]["repeat"]["group_id"]
        assert group_id
        listed = call_api("list_events")["events"]
        assert len(listed) == 4
        assert len(call_api("group_members", group_id=group_id)["events"]) == 4

    def test_edit_member_to_single(self, api):
        created = call_api("save_event", event=WEEKLY_PAYLOAD)["events"]
        edited = dict(created[0], title="Moved", repeat={"type": "none", "interval": 0})
        call_api("save_event", event=edited, editing=True)
        events = call_api("list_events")["events"]
        assert len(events) == 4
        assert events[0]["title"] == "Moved"
        assert events[0]["repeat"]["group_id"] is None

    def test_overlaps_and_delete(self, api):
        created = call_api("save_event", event=dict(WEEKLY_PAYLOAD, repeat={"type": "none"}))["events"][0]
        candidate = dict(WEEKLY_PAYLOAD, startTime="10:30", endTime="12:00", repeat={"type": "none"})
        assert [event["id"] for event in call_api("find_overlaps", event=candidate)["overlapping"]] == [created["id"]]
        assert call_api("find_overlaps", event=created)["overlapping"] == []
        call_api("delete_event", event_id=created["id"])
        assert call_api("list_events")["events"] == []

    def test_visible_events(self, api):
        call_api("save_event", event=WEEKLY_PAYLOAD)
        result = call_api("visible_events", day="2025-10-10", view="week", query="talk")
        assert [event["date"] for event in result["events"]] == ["2025-10-11"]
        assert result["label"] == "October 2025, week 2"

    def test_expand_repeat_uses_configured_horizon(self, api):
        result = call_api("expand_repeat", start="2025-07-31", repeat_type="monthly")
        assert result["dates"] == ["2025-07-31", "2025-08-31"]

    def test_layout_functions(self, api):
        assert call_api("week_dates", day="2025-07-01")["dates"][0] == "2025-06-29"
        grid = call_api("month_grid", day="2025-07-01")
        assert grid["label"] == "July 2025"
        assert grid["weeks"][0] == [None, None, 1, 2, 3, 4, 5]

    def test_invalid_date(self, api):
        with pytest.raises(ValueError):
            call_api("week_dates", day="07/01/2025")


class TestHttpServer:
    """Test the HTTP routes that list and invoke API functions."""

    def test_lists_functions(self, client):
        response = client.get("/api/functions")
        assert response.status_code == 200
        assert "save_event" in {func["name"] for func in response.json()["functions"]}

    def test_invokes_function(self, client):
        response = client.post("/api/functions/save_event", json={"arguments": {"event": WEEKLY_PAYLOAD}})
        assert response.status_code == 200
        assert len(response.json()["result"]["events"]) == 4

    def test_unknown_function_is_404(self, client):
        response = client.post("/api/functions/nope", json={"arguments": {}})
        assert response.status_code == 404

    def test_failed_save_is_400(self, client):
        payload = dict(WEEKLY_PAYLOAD, id="999", repeat={"type": "none"})
        response = client.post("/api/functions/save_event", json={"arguments": {"event": payload, "editing": True}})
        assert response.status_code == 400
