"""
Directory and calendar service.

Combines the Graph client with locally stored employee emails so the API can
ask for a colleague's vacations by employee id.

Dependencies: vacation_board.boundary.graph
System role: Directory/calendar use case orchestration
"""

from typing import Any

from vacation_board.boundary.graph.client import GraphClient, PhotoPayload


class DirectoryService:
    """Bearer-token pass-through to the directory and calendar API."""

    def __init__(self, graph: GraphClient, vacation_subject: str = "Vacaciones") -> None:
        """
        Args:
            graph: Graph client sharing the process HTTP client
            vacation_subject: Event subject that marks a vacation
        """
        self.graph = graph
        self.vacation_subject = vacation_subject

    async def get_profile(self, token: str) -> Any:
        """
        Fetch the signed-in user's profile.

        Args:
            token: Caller's access token

        Returns:
            Remote profile JSON, untouched
        """
        return await self.graph.get_me(token)

    async def get_profile_photo(self, token: str) -> PhotoPayload:
        """
        Fetch the signed-in user's photo.

        Args:
            token: Caller's access token

        Returns:
            PhotoPayload: Raw bytes and remote content type
        """
        return await self.graph.get_my_photo(token)

    async def get_user_photo(self, token: str, user_id: str) -> PhotoPayload:
        """
        Fetch a directory user's photo.

        Args:
            token: Caller's access token
            user_id: Graph user id or user principal name

        Returns:
            PhotoPayload: Raw bytes and remote content type
        """
        return await self.graph.get_user_photo(token, user_id)

    async def get_vacation_events(self, token: str, email: str) -> Any:
        """
        Fetch the vacation events of a user.

        Args:
            token: Caller's access token
            email: User principal name whose calendar is read

        Returns:
            Remote event collection, untouched
        """
        return await self.graph.get_user_events(token, email, self.vacation_subject)
