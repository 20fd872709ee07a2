import os

from flask import Flask

from blueprints import (
    BlueprintAppVersion,
    BlueprintAssignment,
    BlueprintAssistance,
    BlueprintCriticalReport,
    BlueprintHealth,
)
from containers import Container


class FlaskMicroservice(Flask):
    container: Container


def setup_cloud_logging() -> None:  # pragma: no cover
    import google.cloud.logging

    client = google.cloud.logging.Client()  # type: ignore[no-untyped-call]
    client.setup_logging()


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':  # pragma: no cover
        setup_cloud_logging()

    app = FlaskMicroservice(__name__)
    app.container = Container()

    config = app.container.config
    config.firestore.database.from_env('FIRESTORE_DATABASE', '(default)')
    config.supabase.url.from_env('SUPABASE_URL', '')
    config.supabase.service_role_key.from_env('SUPABASE_SERVICE_ROLE_KEY', '')
    config.onesignal.app_id.from_env('ONESIGNAL_APP_ID', '')
    config.onesignal.api_key.from_env('ONESIGNAL_REST_API_KEY', '')
    config.onesignal.android_channel_id.from_env('ONESIGNAL_ANDROID_CHANNEL_ID', '')
    config.notifications.admin_limit.from_env('ADMIN_NOTIFICATION_LIMIT', default=5, as_=int)
    config.fanout.timeout.from_env('FANOUT_TIMEOUT', default=10.0, as_=float)
    config.http.timeout.from_env('HTTP_TIMEOUT', default=5.0, as_=float)
    config.app_version.secret.from_env('APP_VERSION_UPDATE_SECRET', '')

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintAssignment)
    app.register_blueprint(BlueprintAppVersion)
    app.register_blueprint(BlueprintAssistance)
    app.register_blueprint(BlueprintCriticalReport)

    return app
