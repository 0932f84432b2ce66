"""Startup notifications: aggregator registration and keep-alive."""

import logging
import threading
from typing import List

import requests

from config.settings import Settings

logger = logging.getLogger(__name__)

KEEP_ALIVE_URL = "https://oooo.serv00.net/add-url"
REQUEST_TIMEOUT = 10


class NotificationService:
    """Fire-and-forget calls to external services.

    Every call is best-effort: failures are logged and never raised, so
    they cannot affect the subscription endpoint.
    """

    @staticmethod
    def upload_subscription(settings: Settings) -> bool:
        """
        Register the subscription URL with the aggregator at UPLOAD_URL.

        Args:
            settings: Process settings

        Returns:
            True if the aggregator accepted the subscription
        """
        if not settings.upload_url:
            logger.info("Skipping upload nodes: UPLOAD_URL not set")
            return False

        if not settings.project_url:
            logger.info("Skipping subscription upload: PROJECT_URL not set")
            return False

        url = f"{settings.upload_url}/api/add-subscriptions"
        body = {"subscription": [settings.subscription_url]}
        logger.info(f"Uploading subscription {settings.subscription_url} to {url}")

        try:
            response = requests.post(url, json=body, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            logger.error(f"Error uploading subscription: {e}")
            return False

        if response.ok:
            logger.info("Subscription uploaded successfully")
            return True

        logger.error(
            f"Failed to upload subscription: {response.status_code} {response.reason}"
        )
        return False

    @staticmethod
    def add_visit_task(settings: Settings) -> bool:
        """
        Ask the keep-alive service to visit PROJECT_URL periodically.

        Returns:
            True if the task was accepted
        """
        if not settings.auto_access or not settings.project_url:
            logger.info("Skipping adding automatic access task")
            return False

        try:
            response = requests.post(
                KEEP_ALIVE_URL,
                json={"url": settings.project_url},
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Error adding auto access task: {e}")
            return False

        if response.ok:
            logger.info("Automatic access task added successfully")
            return True

        logger.error(
            f"Failed to add auto access task: {response.status_code} {response.reason}"
        )
        return False

    @staticmethod
    def start_background_tasks(settings: Settings) -> List[threading.Thread]:
        """
        Start both notifications on daemon threads without waiting for them.

        Returns:
            The started threads (callers may join them, the server does not)
        """
        threads = [
            threading.Thread(
                target=NotificationService.upload_subscription,
                args=(settings,),
                name="upload-subscription",
                daemon=True,
            ),
            threading.Thread(
                target=NotificationService.add_visit_task,
                args=(settings,),
                name="add-visit-task",
                daemon=True,
            ),
        ]
        for thread in threads:
            thread.start()
        return threads
