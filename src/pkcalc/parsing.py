# src/pkcalc/parsing.py
import logging

from .types import Sample

logger = logging.getLogger(__name__)


def parse_points(csv: str) -> tuple[Sample, ...]:
    """
    Parse "t1:c1,t2:c2,..." (hours, mg/L) into samples sorted by time.

    Each comma-separated segment is split on its first colon and both halves
    are stripped and read as floats. Any malformed segment makes the whole
    text unusable and an empty tuple is returned; so does an empty string.
    The sort is stable, so samples sharing a time keep their input order.
    """
    if not csv or not csv.strip():
        return ()
    samples: list[Sample] = []
    for segment in csv.split(","):
        t_txt, sep, c_txt = segment.partition(":")
        try:
            if not sep:
                raise ValueError("missing ':'")
            samples.append(Sample(time=float(t_txt.strip()), concentration=float(c_txt.strip())))
        except ValueError as e:
            logger.debug("Unparseable point %r (%s); discarding all points.", segment, e)
            return ()
    samples.sort(key=lambda s: s.time)
    return tuple(samples)
