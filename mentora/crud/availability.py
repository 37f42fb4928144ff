from typing import List, Sequence, Tuple

from sqlalchemy.orm import Session

from mentora.models.user import AvailabilityBlock, DayOfWeek


def get_blocks(db: Session, mentor_id: int) -> List[AvailabilityBlock]:
    return (
        db.query(AvailabilityBlock)
        .filter(AvailabilityBlock.mentor_id == mentor_id)
        .order_by(AvailabilityBlock.position, AvailabilityBlock.id)
        .all()
    )


def replace_blocks(
    db: Session,
    mentor_id: int,
    blocks: Sequence[Tuple[DayOfWeek, str, str]],
) -> List[AvailabilityBlock]:
    """Overwrite the mentor's whole list; the caller commits."""
    db.query(AvailabilityBlock).filter(
        AvailabilityBlock.mentor_id == mentor_id
    ).delete(synchronize_session=False)

    rows = [
        AvailabilityBlock(
            mentor_id=mentor_id,
            position=position,
            day=day,
            start_time=start_time,
            end_time=end_time,
        )
        for position, (day, start_time, end_time) in enumerate(blocks)
    ]
    db.add_all(rows)
    db.flush()
    return rows
