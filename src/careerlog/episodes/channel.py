"""Channel metadata file (``channel-info.json``)."""

import json
import logging
from pathlib import Path

from careerlog.episodes.models import ChannelInfo
from careerlog.episodes.rss import parse_channel_info
from careerlog.episodes.store import dump_json
from careerlog.utils.atomic import write_file_atomic

logger = logging.getLogger(__name__)


def update_channel_info(xml_path: Path, output_path: Path) -> bool:
    """Refresh ``output_path`` from the feed at ``xml_path``.

    The file is only rewritten when the channel data actually changed, so
    the site build does not see a spurious diff.

    Returns:
        True if the file was created or updated
    """
    channel = parse_channel_info(xml_path.read_text(encoding="utf-8"))

    if output_path.exists():
        try:
            existing = ChannelInfo.model_validate(
                json.loads(output_path.read_text(encoding="utf-8"))
            )
        except ValueError as e:
            logger.warning(f"Replacing unreadable channel info: {e}")
        else:
            if existing == channel:
                logger.info("Channel info is up to date. No changes needed.")
                return False
            logger.info("Channel info has changed. Updating...")
    else:
        logger.info(f"Creating new {output_path.name}...")

    write_file_atomic(output_path, dump_json(channel.model_dump()))
    return True
