from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class PathwayOptionTollModel(Base):
    __tablename__ = 'pathway_option_toll'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pathway_option_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('pathway_option.id'), nullable=False, index=True
    )
    node_id: Mapped[int] = mapped_column(Integer, ForeignKey('node.id'), nullable=False, index=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    pass_time_min: Mapped[int] = mapped_column(Integer, nullable=False)
    distance_km: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint('pathway_option_id', 'sequence', name='uq_pathway_option_toll_sequence'),
    )
    __mapper_args__ = {'eager_defaults': True}
