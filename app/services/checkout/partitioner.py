import logging

logger = logging.getLogger(__name__)


def partition_by_seller(lines):
    """Group cart lines by owning seller.

    Returns a dict of seller_id -> lines, keyed in first-seen order with each
    seller's lines in their original order. Lines without a seller are left
    out.
    """
    partitions = {}
    skipped = 0
    for line in lines:
        if line.seller_id is None or line.seller_id == "":
            skipped += 1
            continue
        partitions.setdefault(line.seller_id, []).append(line)
    if skipped:
        logger.warning("Skipped %d cart line(s) without a seller", skipped)
    return partitions
