import os
import requests
from datetime import datetime
from typing import Optional, Union, List
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:3010")

recurrence_emojis = {
    "daily": "🔁",
    "weekly": "📆",
    "monthly": "🗓️",
    "yearly": "🎉"
}

tag_emojis = {
    "personal": "🙂",
    "health": "💪",
    "career": "💼",
    "finance": "💰",
    "learning": "📚"
}

def api_request(method: str, endpoint: str, data: Optional[dict] = None) -> Optional[Union[dict, list]]:
    """Make API request to the backend"""
    url = f"{BACKEND_URL}{endpoint}"

    try:
        if method == "GET":
            response = requests.get(url, params=data, timeout=10)
        elif method == "POST":
            response = requests.post(url, json=data, timeout=10)
        else:
            return None

        if response.status_code in [200, 201]:
            return response.json()
        elif response.status_code == 400:
            st.error(response.json().get("detail", "Invalid goal"))
            return None
        else:
            st.error(f"API Error: {response.status_code}")
            return None
    except requests.exceptions.RequestException as e:
        st.error(f"Request failed: {e}")
        return None

def list_goals(search: str = "") -> List[dict]:
    """Get goals in creation order, filtered by title when a search term is given"""
    params = {"search": search} if search else None
    result = api_request("GET", "/goals", params)
    return result if result else []

def get_goal(goal_id: str) -> Optional[dict]:
    """Get a specific goal by ID"""
    return api_request("GET", f"/goals/{goal_id}")

def get_goal_options() -> Optional[dict]:
    """Get the ordered recurrence and tag options"""
    return api_request("GET", "/goals/options")

def create_goal(title: str, description: str, recurrence_index: int, tag_index: int) -> Optional[dict]:
    """Create a goal, recurrence and tag are positions in the option lists"""
    return api_request("POST", "/goals", {
        "title": title,
        "description": description,
        "recurrence_index": recurrence_index,
        "tag_index": tag_index
    })

def format_created_at(date_str: str) -> str:
    try:
        return datetime.fromisoformat(date_str.replace('Z', '+00:00')).strftime("%b %d, %Y")
    except (AttributeError, ValueError):
        return "Unknown date"
