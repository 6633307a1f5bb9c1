import requests
from unittest.mock import patch, MagicMock

import utils

def mock_response(status_code, payload):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response

class TestGoalRequests:
    @patch("utils.requests.get")
    def test_list_goals_sends_search(self, mock_get):
        mock_get.return_value = mock_response(200, [{"id": "goal_1", "title": "GoalTitle1"}])
        goals = utils.list_goals("GoalTitle1")
        assert goals == [{"id": "goal_1", "title": "GoalTitle1"}]
        mock_get.assert_called_once_with(f"{utils.BACKEND_URL}/goals", params={"search": "GoalTitle1"}, timeout=10)

    @patch("utils.requests.get")
    def test_list_goals_without_search(self, mock_get):
        mock_get.return_value = mock_response(200, [])
        assert utils.list_goals() == []
        mock_get.assert_called_once_with(f"{utils.BACKEND_URL}/goals", params=None, timeout=10)

    @patch("utils.st")
    @patch("utils.requests.post")
    def test_create_goal_posts_indexes(self, mock_post, mock_st):
        mock_post.return_value = mock_response(201, {"id": "goal_1"})
        assert utils.create_goal("GoalTitle", "GoalDescription", 2, 2) == {"id": "goal_1"}
        mock_post.assert_called_once_with(f"{utils.BACKEND_URL}/goals", json={
            "title": "GoalTitle",
            "description": "GoalDescription",
            "recurrence_index": 2,
            "tag_index": 2
        }, timeout=10)
        mock_st.error.assert_not_called()

    @patch("utils.st")
    @patch("utils.requests.post")
    def test_create_goal_shows_validation_error(self, mock_post, mock_st):
        mock_post.return_value = mock_response(400, {"detail": "Title must not be empty"})
        assert utils.create_goal("", "", 0, 0) is None
        mock_st.error.assert_called_once_with("Title must not be empty")

    @patch("utils.st")
    @patch("utils.requests.get")
    def test_backend_down(self, mock_get, mock_st):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")
        assert utils.list_goals() == []
        mock_st.error.assert_called_once()

    @patch("utils.st")
    @patch("utils.requests.get")
    def test_get_goal_not_found(self, mock_get, mock_st):
        mock_get.return_value = mock_response(404, {"detail": "Goal goal_x not found"})
        assert utils.get_goal("goal_x") is None
        mock_st.error.assert_called_once_with("API Error: 404")

def test_format_created_at():
    assert utils.format_created_at("2024-03-05T10:00:00") == "Mar 05, 2024"
    assert utils.format_created_at("") == "Unknown date"
