"""
Response envelope shared by every endpoint.
Every body carries a ``status`` of OK, ERROR or NO RESULTS plus its payload.
"""

from typing import Any

STATUS_OK = "OK"
STATUS_ERROR = "ERROR"
STATUS_NO_RESULTS = "NO RESULTS"

# Messages returned to clients, kept verbatim for existing consumers
MSG_SAVE_FAILED = "Error saving meal"
MSG_MEAL_NOT_FOUND = "Could not find that meal"
MSG_MEALS_NOT_FOUND = "Could not find meals"
MSG_SEARCH_FAILED = "Something went wrong"
MSG_NO_RESULTS = "We couldn't find any results"
MSG_UPDATE_FAILED = "Error updating meal"
MSG_DELETE_NOT_FOUND = "Could not find that meal to delete"
MSG_INVALID_REQUEST = "Invalid request"
MSG_UNEXPECTED = "Something went wrong"


def ok_response(**payload: Any) -> dict:
    """Create a success envelope, e.g. ``ok_response(meal=...)``"""
    return {"status": STATUS_OK, **payload}


def error_response(message: str) -> dict:
    """Create an error envelope"""
    return {"status": STATUS_ERROR, "message": message}


def no_results_response(message: str = MSG_NO_RESULTS) -> dict:
    """Create the envelope for a search that matched nothing"""
    return {"status": STATUS_NO_RESULTS, "message": message}
