"""
Pull Request File Parser

Parses GitHub "list pull request files" responses into ChangedFile
descriptors.
"""

import logging
from typing import Dict, List

from ..models.source_file import ChangedFile


logger = logging.getLogger(__name__)


class PullRequestFileParser:
    """
    Parser for GitHub pull request file data.

    Keeps the API order, which is the order files are validated and
    reported in.
    """

    def parse_files(self, files_data: List[Dict]) -> List[ChangedFile]:
        """
        Parse file entries from the GitHub API.

        Args:
            files_data: List of file data from GitHub API

        Returns:
            List of ChangedFile objects
        """
        changed_files = [self._parse_file(file_data) for file_data in files_data]
        logger.info(f"Parsed {len(changed_files)} changed files")
        return changed_files

    def _parse_file(self, file_data: Dict) -> ChangedFile:
        """
        Parse a single file entry.

        Args:
            file_data: File data from GitHub API

        Returns:
            ChangedFile object
        """
        file_path = file_data['filename']
        logger.debug(f"Parsing file change: {file_path}")

        return ChangedFile(
            path=file_path,
            status=file_data.get('status', 'modified'),
            contents_url=file_data.get('contents_url') or file_data.get('blob_url'),
        )
