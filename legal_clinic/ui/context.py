from __future__ import annotations

from dataclasses import dataclass

import requests

from legal_clinic.adapters.beacon import ThreadBeacon
from legal_clinic.adapters.clock import SystemClock
from legal_clinic.adapters.timer import ThreadingIntervalTimer
from legal_clinic.adapters.view_reporter import BackgroundViewReporter
from legal_clinic.api.client import ApiClient
from legal_clinic.api.resources import (
    ActivityAPI,
    AuthAPI,
    BlogAPI,
    BookmarkAPI,
    ConversationAPI,
    PasswordResetAPI,
    UserAPI,
)
from legal_clinic.components.engagement import EngagementTracker
from legal_clinic.components.session import SessionStore
from legal_clinic.ports.clock import ClockPort
from legal_clinic.ports.reporting import BeaconPort, UnloadHubPort, ViewReporterPort
from legal_clinic.ports.storage import KeyValueStoragePort
from legal_clinic.ports.timer import IntervalTimerPort
from legal_clinic.settings.models import Settings


@dataclass
class ServiceContext:
    settings: Settings
    api: ApiClient
    auth_api: AuthAPI
    blog_api: BlogAPI
    bookmark_api: BookmarkAPI
    password_reset_api: PasswordResetAPI
    user_api: UserAPI
    conversation_api: ConversationAPI
    activity_api: ActivityAPI
    sessions: SessionStore
    reporter: ViewReporterPort
    beacon: BeaconPort
    timer: IntervalTimerPort
    clock: ClockPort
    unload_hub: UnloadHubPort

    @classmethod
    def create(
        cls,
        settings: Settings,
        storage: KeyValueStoragePort,
        unload_hub: UnloadHubPort,
        http: requests.Session | None = None,
        clock: ClockPort | None = None,
        timer: IntervalTimerPort | None = None,
        reporter: ViewReporterPort | None = None,
        beacon: BeaconPort | None = None,
    ) -> ServiceContext:
        clock = clock or SystemClock()

        api = ApiClient(
            settings.api.base_url,
            timeout=settings.api.timeout_seconds,
            session=http,
        )
        auth_api = AuthAPI(api)
        blog_api = BlogAPI(api, view_path=settings.tracking.view_path)

        sessions = SessionStore(
            storage,
            auth_api,
            token_key=settings.storage.token_key,
            identity_key=settings.storage.identity_key,
            clock=clock,
        )
        # The client reaches the store only through these callbacks
        api.token_provider = sessions.token
        api.on_unauthorized = sessions.invalidate

        return cls(
            settings=settings,
            api=api,
            auth_api=auth_api,
            blog_api=blog_api,
            bookmark_api=BookmarkAPI(api),
            password_reset_api=PasswordResetAPI(api),
            user_api=UserAPI(api),
            conversation_api=ConversationAPI(api),
            activity_api=ActivityAPI(api),
            sessions=sessions,
            reporter=reporter or BackgroundViewReporter(blog_api),
            beacon=beacon or ThreadBeacon(timeout=settings.tracking.beacon_timeout_seconds),
            timer=timer or ThreadingIntervalTimer(),
            clock=clock,
            unload_hub=unload_hub,
        )

    def new_tracker(self) -> EngagementTracker:
        tracking = self.settings.tracking
        return EngagementTracker(
            reporter=self.reporter,
            beacon=self.beacon,
            timer=self.timer,
            clock=self.clock,
            unload_hub=self.unload_hub,
            beacon_url=self.blog_api.view_url,
            interval_seconds=tracking.interval_seconds,
            min_report_seconds=tracking.min_report_seconds,
        )
