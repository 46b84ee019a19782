"""Module for Jira issue creation metadata."""

import logging

from ..models.jira import JiraCreateMeta
from .client import JiraClient

logger = logging.getLogger("jira-issue-cli.jira")


class MetadataMixin(JiraClient):
    """Mixin for the metadata needed to create issues."""

    def get_meta_data(self) -> JiraCreateMeta:
        """
        Get the projects the user can create issues in, with their issue types.

        Returns:
            JiraCreateMeta listing projects in the order Jira returned them

        Raises:
            NetworkError: If Jira could not be reached
            ApiError: If Jira rejected the request
            TypeError: If Jira answered with something other than an object
        """
        response = self.api_request("get", "issue/createmeta")
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from `issue/createmeta`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        meta = JiraCreateMeta.from_api_response(response)
        logger.debug(f"Create metadata lists {len(meta.projects)} projects")
        return meta
