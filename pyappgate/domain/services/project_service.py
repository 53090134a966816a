"""Project access checks."""

from pyappgate.domain.models.access import SessionIdentity
from pyappgate.storage.repositories.project_repository import ProjectRepository
from pyappgate.utils.class_logger import LoggerMixin


class ProjectService(LoggerMixin):
    """Service answering who may see a project."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository

    def has_access(self, project_id: str, identity: SessionIdentity) -> bool:
        """
        Check whether the identity may access the project.

        Args:
            project_id: The project ID.
            identity: The session identity of the requester.

        Returns:
            True if the user is a member of the project.

        """
        if not identity.is_present:
            return False
        allowed = self.project_repository.is_member(project_id, identity.user_id)
        if not allowed:
            self.logger.info(f"User {identity.user_id} denied access to project {project_id}")
        return allowed
