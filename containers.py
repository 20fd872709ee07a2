from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer, WiringConfiguration

from repositories.firestore import (
    FirestoreAppVersionRepository,
    FirestoreAssignmentRepository,
    FirestoreAuditRepository,
    FirestoreNotificationRepository,
    FirestoreResponderRepository,
    FirestoreSubscriptionRepository,
)
from repositories.rest import RestBroadcastRepository, RestOneSignalRepository, RestPushRepository, StaticTokenProvider
from workflow import NotificationFanout, StatusUpdateService


class Container(DeclarativeContainer):
    wiring_config = WiringConfiguration(packages=['blueprints'])
    config = providers.Configuration()

    supabase_token = providers.Singleton(StaticTokenProvider, token=config.supabase.service_role_key)

    assignment_repo = providers.ThreadSafeSingleton(FirestoreAssignmentRepository, database=config.firestore.database)
    audit_repo = providers.ThreadSafeSingleton(FirestoreAuditRepository, database=config.firestore.database)
    notification_repo = providers.ThreadSafeSingleton(
        FirestoreNotificationRepository, database=config.firestore.database
    )
    responder_repo = providers.ThreadSafeSingleton(FirestoreResponderRepository, database=config.firestore.database)
    subscription_repo = providers.ThreadSafeSingleton(
        FirestoreSubscriptionRepository, database=config.firestore.database
    )
    app_version_repo = providers.ThreadSafeSingleton(FirestoreAppVersionRepository, database=config.firestore.database)

    push_repo = providers.ThreadSafeSingleton(
        RestPushRepository,
        base_url=config.supabase.url,
        token_provider=supabase_token,
        timeout=config.http.timeout,
    )

    broadcast_repo = providers.ThreadSafeSingleton(
        RestBroadcastRepository,
        base_url=config.supabase.url,
        token_provider=supabase_token,
        timeout=config.http.timeout,
    )

    device_push_repo = providers.ThreadSafeSingleton(
        RestOneSignalRepository,
        app_id=config.onesignal.app_id,
        api_key=config.onesignal.api_key,
        android_channel_id=config.onesignal.android_channel_id,
        timeout=config.http.timeout,
    )

    fanout = providers.Factory(
        NotificationFanout,
        notification_repo=notification_repo,
        responder_repo=responder_repo,
        subscription_repo=subscription_repo,
        push_repo=push_repo,
        device_push_repo=device_push_repo,
        broadcast_repo=broadcast_repo,
        admin_limit=config.notifications.admin_limit,
    )

    status_service = providers.Factory(
        StatusUpdateService,
        assignment_repo=assignment_repo,
        audit_repo=audit_repo,
        fanout=fanout,
        fanout_timeout=config.fanout.timeout,
    )
