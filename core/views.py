"""API views for core application."""

import structlog
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth import JWTAuthentication
from core.schemas.message import (
    MessageCreatedResponse,
    MessageCreateRequest,
    MessageDeleteRequest,
    MessageQuery,
    MessageReadRequest,
    MessageReadResponse,
    UnreadMessageCountResponse,
)
from core.schemas.page import PageQuery
from core.services import health_service
from core.services.message_service import message_service
from core.services.message_user_service import message_user_service

logger = structlog.get_logger(__name__)


def _dump(schema) -> dict:
    """Serialize a response schema with camelCase keys."""
    return schema.model_dump(mode="json", by_alias=True)


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 if the service is alive and running without checking
    external dependencies. Exempt from authentication.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint.

    Returns 200 with a degraded status when the database is unavailable.
    Exempt from authentication.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(mode="json"), status=status.HTTP_200_OK)


class MessageListView(APIView):
    """API endpoint for the current user's messages.

    GET: Paged list of messages received by the current user
    POST: Create a message and send it to its recipients
    DELETE: Delete messages together with their recipient associations
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Retrieve a page of the current user's messages.

        Query parameters:
        - page: Page number (default: 1)
        - size: Records per page (default: 10, max: 1000)
        - title: Title contains (optional)
        - type: Message type (optional)
        - isRead: Filter by read state (optional)

        Args:
            request: HTTP request

        Returns:
            200 with {rows, total}
            400 Bad Request if a query parameter is invalid
        """
        params = request.query_params.dict()
        page_query = PageQuery.model_validate(params)
        query = MessageQuery.model_validate(params)
        # Users only ever page through their own messages
        query.user_id = request.user.user_id

        page = message_service.page(query, page_query)

        logger.info(
            "User messages retrieved",
            user_id=request.user.user_id,
            count=len(page.rows),
            total=page.total,
        )
        return Response(_dump(page), status=status.HTTP_200_OK)

    def post(self, request):
        """Create a message.

        Args:
            request: HTTP request with title, content, type and recipientIds

        Returns:
            201 Created with the message ID
            400 Bad Request if the body is invalid
            500 with the business error message if recipientIds is empty
        """
        logger.info(
            "Create message request received",
            user_id=request.user.user_id,
        )
        create_request = MessageCreateRequest.model_validate(request.data)

        message_id = message_service.add(
            create_request,
            create_request.recipient_ids,
            create_user=request.user.user_id,
        )

        return Response(
            _dump(MessageCreatedResponse(id=message_id)),
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request):
        """Delete messages by ID.

        Args:
            request: HTTP request with ids

        Returns:
            204 No Content on success
        """
        delete_request = MessageDeleteRequest.model_validate(request.data)

        logger.info(
            "Delete messages request received",
            user_id=request.user.user_id,
            message_count=len(delete_request.ids),
        )
        message_service.delete(delete_request.ids)

        return Response(status=status.HTTP_204_NO_CONTENT)


class MessageDetailView(APIView):
    """API endpoint for a single message."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, message_id):
        """Retrieve a message with the current user's read state.

        Args:
            request: HTTP request
            message_id: ID of the message

        Returns:
            200 with the message detail
            500 with the business error message if it does not exist or
            was not sent to the current user
        """
        message = message_service.get(message_id, user_id=request.user.user_id)
        return Response(_dump(message), status=status.HTTP_200_OK)


class MessageReadView(APIView):
    """API endpoint for marking the current user's messages as read."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def patch(self, request):
        """Mark messages as read; an empty ids list marks all of them.

        Args:
            request: HTTP request with optional ids

        Returns:
            200 with the number of messages marked as read
        """
        read_request = MessageReadRequest.model_validate(request.data or {})
        updated = message_user_service.read_message(
            request.user.user_id, read_request.ids
        )
        return Response(
            _dump(MessageReadResponse(updated=updated)), status=status.HTTP_200_OK
        )


class MessageUnreadCountView(APIView):
    """API endpoint for the current user's unread message count."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return the number of unread messages for the current user."""
        total = message_user_service.count_unread_by_user_id(request.user.user_id)
        return Response(
            _dump(UnreadMessageCountResponse(total=total)), status=status.HTTP_200_OK
        )
