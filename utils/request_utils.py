# utils/request_utils.py
from flask import abort, request


def get_json_body():
    """The request's JSON object, {} when there is no body; any other JSON value is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        abort(400, description='Request body must be a JSON object')
    return data
