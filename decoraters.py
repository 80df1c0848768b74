# decorators.py
from functools import wraps
from flask import request, jsonify, g


def authorize(*roles):
    """
    A decorator to check that the authenticated user has one of the given roles.
    It assumes the authentication hook already stored the token claims in g.auth.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            claims = g.get('auth')
            if not claims:
                return jsonify({"error": "Access Denied."}), 401

            if claims.get('role') not in roles:
                return jsonify({"error": "Forbidden: Insufficient permissions."}), 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator


def authorize_owner_or_admin(resource_user_id):
    """
    A decorator that lets the request through when the caller owns the resource or is an ADMIN.
    `resource_user_id` receives the view arguments and returns the owning user's id.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            claims = g.get('auth')
            if not claims:
                return jsonify({"error": "Unauthorized: Missing token."}), 401

            owner_id = resource_user_id(request.view_args or {})
            if claims.get('role') == 'ADMIN' or claims.get('id') == owner_id:
                return f(*args, **kwargs)

            return jsonify({"error": "Forbidden: You do not have access to this resource."}), 403
        return decorated_function
    return decorator
