import httpx

from tfs_rest.results import Failure, Success
from tfs_rest.services import projects, teams, test_plans


def test_get_teams(conn, respond_with):
    sent = respond_with({"count": 2, "value": [{"id": "a", "name": "Fabrikam Team"}, {"id": "b", "name": "Web"}]})

    assert teams.get_teams(conn) == Success(["Fabrikam Team", "Web"])
    assert sent[0].url.path == "/tfs/DefaultCollection/_apis/projects/Fabrikam/teams"


def test_get_team_members_handles_both_shapes(conn, respond_with):
    respond_with(
        {
            "value": [
                {"id": "1", "displayName": "J Doe", "uniqueName": "DOMAIN\\jdoe"},
                {"identity": {"id": "2", "displayName": "A Smith"}},
            ]
        }
    )

    assert teams.get_team_members(conn, "Web").value == ["J Doe", "A Smith"]


def test_get_test_plans_and_id(conn, respond_with):
    payload = {"value": [{"id": 3, "name": "Sprint 1", "state": "Active"}, {"id": 4, "name": "Sprint 2"}]}
    sent = respond_with(payload, payload)

    assert test_plans.get_test_plans(conn).value == [{"id": 3, "name": "Sprint 1"}, {"id": 4, "name": "Sprint 2"}]
    assert test_plans.get_test_plan_id(conn, "Sprint 2") == Success(4)
    assert sent[0].url.path == "/tfs/DefaultCollection/Fabrikam/_apis/test/plans"


def test_get_test_plan(conn, respond_with):
    sent = respond_with({"id": 3, "name": "Sprint 1"})

    assert test_plans.get_test_plan(conn, 3).value["name"] == "Sprint 1"
    assert sent[0].url.path.endswith("/test/plans/3")


def test_get_test_suites(conn, respond_with):
    sent = respond_with({"value": [{"id": 10, "name": "Root", "plan": {"id": "3"}}]})

    assert test_plans.get_test_suites(conn, 3) == Success([{"id": 10, "name": "Root"}])
    assert sent[0].url.path.endswith("/test/plans/3/suites")


def test_get_test_runs_for_build(conn, respond_with):
    sent = respond_with({"value": [{"id": 500, "name": "Unit", "state": "Completed", "totalTests": 12}]})

    assert test_plans.get_test_runs_for_build(conn, 42).value == [{"id": 500, "name": "Unit", "state": "Completed"}]
    assert sent[0].url.params["buildUri"] == "vstfs:///Build/Build/42"


def test_project_id(conn, respond_with):
    respond_with({"id": "eb6e4656-77fc-42a1-9181-4c6d8e9da5d1", "name": "Fabrikam"})

    assert projects.get_project_id(conn).value == "eb6e4656-77fc-42a1-9181-4c6d8e9da5d1"


def test_project_not_visible(conn, respond_with):
    respond_with(httpx.Response(401))

    assert isinstance(projects.get_project(conn), Failure)


def test_null_team_member_fails(conn, respond_with):
    respond_with({"value": [{"displayName": "J Doe"}, None]})

    assert isinstance(teams.get_team_members(conn, "Web"), Failure)


def test_member_with_null_identity_uses_top_level_name(conn, respond_with):
    respond_with({"value": [{"identity": None, "displayName": "J Doe"}]})

    assert teams.get_team_members(conn, "Web") == Success(["J Doe"])


def test_test_plan_body_that_is_not_an_object_fails(conn, respond_with):
    respond_with([{"id": 3}])

    assert isinstance(test_plans.get_test_plan(conn, 3), Failure)
