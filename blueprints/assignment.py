from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from workflow import StatusUpdateService

from .util import class_route, json_response

blp = Blueprint('Assignment', __name__)


@class_route(blp, '/api/v1/assignments/status')
class UpdateAssignmentStatus(MethodView):
    init_every_request = False

    @inject
    def post(self, service: StatusUpdateService = Provide[Container.status_service]) -> Response:
        result = service.update_status(request.get_json(silent=True))

        return json_response(result.to_dict(), result.status_code)
