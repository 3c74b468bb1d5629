"""
Submitter for posting links and self-posts to a subreddit.
"""
from typing import Any, Dict, Optional

import requests

from regreddit.auth.api_session import ApiSession
from regreddit.errors import SubmitError
from regreddit.traversal.url_builder import SUBMIT_PATH
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)


class Submitter:
    """Submits posts through /api/submit."""

    def __init__(self, session: ApiSession):
        self.session = session

    def submit_link(self, subreddit: str, title: str, url: str) -> Dict[str, Any]:
        """
        Submit a link post.

        Args:
            subreddit: Target subreddit name
            title: Post title
            url: Absolute URL to submit

        Returns:
            Decoded response body

        Raises:
            SubmitError: If Reddit refuses the submission
        """
        logger.info(f"Submitting link to r/{subreddit}...")
        result = self._submit(
            {"sr": subreddit, "title": title, "kind": "link", "url": url, "resubmit": "true"}
        )
        logger.info("Successfully submitted a link")
        return result

    def submit_self_post(
        self,
        subreddit: str,
        title: str,
        text: Optional[str] = None,
        richtext_json: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Submit a self-post with either a markdown body or a richtext JSON body.

        Args:
            subreddit: Target subreddit name
            title: Post title
            text: Markdown body
            richtext_json: Richtext JSON document as a string

        Returns:
            Decoded response body

        Raises:
            ValueError: Unless exactly one of text and richtext_json is given
            SubmitError: If Reddit refuses the submission
        """
        if (text is None) == (richtext_json is None):
            raise ValueError("only one input source is accepted")

        form = {"sr": subreddit, "title": title, "kind": "self", "resubmit": "true"}
        if text is not None:
            logger.debug('Building a "text" self-post request')
            form["text"] = text
        else:
            logger.debug('Building a "richtext_json" self-post request')
            form["richtext_json"] = richtext_json

        logger.info(f"Submitting self-post to r/{subreddit}...")
        result = self._submit(form)
        logger.info("Successfully submitted a self-post")
        return result

    def _submit(self, form: Dict[str, str]) -> Dict[str, Any]:
        try:
            response = self.session.post(SUBMIT_PATH, data=form)
        except requests.RequestException as e:
            raise SubmitError(f"Network error while submitting: {e}") from e

        if response.status_code != 200:
            raise SubmitError(
                f"Submit failed with status {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(response.text)
        try:
            body = response.json()
        except ValueError as e:
            raise SubmitError(f"Could not deserialize submit response: {e}") from e

        if not isinstance(body, dict) or body.get("success") is not True:
            raise SubmitError("Reddit did not accept the submission")

        return body
