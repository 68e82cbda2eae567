"""Ownership checks for problem and review mutations."""

import logfire

from algonote.domain.error import AuthorizationError
from algonote.domain.value import MemberId

from .base import Service


class OwnershipValidator(Service):
    """Confirms the acting member wrote the content they want to change."""

    def check_same_writer(
        self,
        editor_id: MemberId,
        writer_id: MemberId,
        resource: str,
        resource_id: str,
    ) -> None:
        """Require the editor to be the writer.

        Args:
            editor_id: Member attempting the mutation
            writer_id: Member who owns the target
            resource: Kind of target, for the error message ("problem", "review")
            resource_id: ID of the target

        Raises:
            AuthorizationError: If the editor is not the writer
        """
        if editor_id != writer_id:
            logfire.warn(
                "Member attempted to change content written by another member",
                resource=resource,
                resource_id=resource_id,
                editor_id=str(editor_id),
                writer_id=str(writer_id),
            )
            raise AuthorizationError(resource, resource_id, str(editor_id))
