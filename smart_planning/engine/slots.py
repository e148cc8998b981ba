"""Working-day slot grid generation."""

import logging
from typing import List

from ..models.schedule import TimeSlot
from ..utils.datetime_utils import format_time, parse_time

logger = logging.getLogger(__name__)


def generate_time_slots(
    start_time: str,
    end_time: str,
    focus_minutes: int,
    break_minutes: int,
) -> List[TimeSlot]:
    """Split the working window into focus blocks separated by breaks.

    Breaks are carved out of the day but only focus slots are returned. The
    last focus block is truncated at ``end_time``. An empty or inverted
    window, malformed times and a non-positive focus length all give an
    empty list.
    """
    try:
        current = parse_time(start_time)
        end = parse_time(end_time)
    except ValueError as e:
        logger.warning("Cannot generate slots for %r-%r: %s", start_time, end_time, e)
        return []
    
    if focus_minutes <= 0:
        logger.warning("Focus length must be positive, got %s", focus_minutes)
        return []
    
    slots = []
    
    while current < end:
        focus_end = min(current + focus_minutes, end)
        slots.append(TimeSlot(
            start=format_time(current),
            end=format_time(focus_end),
            duration=focus_end - current,
            type='focus',
            energy_required='high',
        ))
        current = focus_end
        
        if current < end:
            break_end = min(current + max(break_minutes, 0), end)
            if break_end > current:
                slots.append(TimeSlot(
                    start=format_time(current),
                    end=format_time(break_end),
                    duration=break_end - current,
                    type='break',
                    energy_required='low',
                ))
                current = break_end
    
    focus_slots = [slot for slot in slots if slot.type == 'focus']
    logger.debug(
        "Generated %d focus slots for %s-%s (focus %d, break %d)",
        len(focus_slots), start_time, end_time, focus_minutes, break_minutes,
    )
    return focus_slots
