import json
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Blueprint, Response
from flask.views import View

V = TypeVar('V', bound=type[View])


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[V], V]:
    def decorator(cls: V) -> V:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, status: int) -> Response:
    return json_response({'code': status, 'message': msg}, status)
