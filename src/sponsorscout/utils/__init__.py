"""Utility functions package."""

from sponsorscout.utils.file_storage import delete_file, file_exists, load_file, save_file
from sponsorscout.utils.slug import create_company_id
from sponsorscout.utils.timestamp import parse_timestamp, to_iso, utc_now, utc_now_iso

__all__ = [
    "create_company_id",
    "delete_file",
    "file_exists",
    "load_file",
    "parse_timestamp",
    "save_file",
    "to_iso",
    "utc_now",
    "utc_now_iso",
]
