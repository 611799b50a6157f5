from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class BusSeatModel(Base):
    __tablename__ = 'bus_seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seat_diagram_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('seat_diagram.id'), nullable=False, index=True
    )
    floor_number: Mapped[int] = mapped_column(Integer, nullable=False)
    position_x: Mapped[int] = mapped_column(Integer, nullable=False)
    position_y: Mapped[int] = mapped_column(Integer, nullable=False)
    space_type: Mapped[str] = mapped_column(String(20), default='seat', nullable=False)
    seat_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    seat_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    reclinement_angle: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    meta: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        Index(
            'ix_bus_seat_diagram_position',
            'seat_diagram_id',
            'floor_number',
            'position_x',
            'position_y',
        ),
    )

    __mapper_args__ = {'eager_defaults': True}
