import hmac
import logging
from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import AppVersion, Platform
from repositories import AppVersionRepository

from .util import class_route, error_response, json_response

blp = Blueprint('App version', __name__)

logger = logging.getLogger(__name__)

# Served when no usable row exists, so that every client is told to update
FALLBACK_VERSION = '99.0.0'


def app_version_to_dict(app_version: AppVersion | None) -> dict[str, Any]:
    if app_version is None or not app_version.min_version or not app_version.latest_version:
        return {
            'min_version': FALLBACK_VERSION,
            'latest_version': FALLBACK_VERSION,
            'force_update': True,
            'download_url': app_version.download_url if app_version else None,
            'release_notes': (
                app_version.release_notes
                if app_version
                else 'Please update the app. Version check could not be completed.'
            ),
        }

    # Only the latest version is allowed to run
    return {
        'min_version': app_version.latest_version,
        'latest_version': app_version.latest_version,
        'force_update': True,
        'download_url': app_version.download_url,
        'release_notes': app_version.release_notes,
    }


def requested_platform() -> str:
    platform = request.args.get('platform', Platform.ANDROID.value)

    if request.method == 'POST':
        body = request.get_json(silent=True)
        if isinstance(body, dict) and isinstance(body.get('platform'), str):
            platform = body['platform']

    return platform.lower()


@class_route(blp, '/api/v1/app-version', methods=['GET', 'POST'])
class GetAppVersion(MethodView):
    init_every_request = False

    @inject
    def get(self, app_version_repo: AppVersionRepository = Provide[Container.app_version_repo]) -> Response:
        platform = requested_platform()

        if platform not in list(Platform):
            return error_response('Invalid platform. Use android or ios.', 400)

        app_version = app_version_repo.get(Platform(platform))
        if app_version is None:
            logger.warning('No app version row for %s, forcing update', platform)

        return json_response(app_version_to_dict(app_version), 200)

    def post(self) -> Response:
        return self.get()


@class_route(blp, '/api/v1/app-version/publish')
class PublishAppVersion(MethodView):
    init_every_request = False

    @inject
    def post(
        self,
        app_version_repo: AppVersionRepository = Provide[Container.app_version_repo],
        secret: str = Provide[Container.config.app_version.secret],
    ) -> Response:
        provided = request.headers.get('X-App-Version-Secret', '')
        if not secret or not hmac.compare_digest(provided, secret):
            return error_response('Unauthorized', 401)

        body = request.get_json(silent=True)
        version = body.get('version') if isinstance(body, dict) else None
        if not isinstance(version, str) or not version.strip():
            return error_response('Body must include "version" (e.g. "1.2.0")', 400)

        platform = Platform.IOS if body.get('platform') == Platform.IOS.value else Platform.ANDROID
        app_version = app_version_repo.set_version(platform, version.strip())
        logger.info('Published %s version %s', platform, app_version.latest_version)

        return json_response(
            {
                'ok': True,
                'platform': platform.value,
                'min_version': app_version.min_version,
                'latest_version': app_version.latest_version,
            },
            200,
        )
