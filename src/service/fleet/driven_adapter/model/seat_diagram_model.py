from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class SeatDiagramModel(Base):
    __tablename__ = 'seat_diagram'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    num_floors: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    seats_per_floor: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    bus_diagram_model_id: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, index=True
    )
    bathroom_rows: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_factory_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_modified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    allows_adjacent_seat: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    observations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __mapper_args__ = {'eager_defaults': True}
