from sqlalchemy import Column, String, Text, JSON, TIMESTAMP

from statsapi.core.database import Base


# =========================
# Statistics
# =========================
class Statistics(Base):
    """
    One generated statistics document.

    The path is derived from the title, so saving a document with the
    same title again overwrites the previous one.
    """

    __tablename__ = "statistics"

    path = Column(String, primary_key=True)

    title = Column(String, nullable=False)
    explanation = Column(Text, nullable=True)
    display_mode = Column(String, nullable=False, server_default="DEFAULT")
    group_name = Column(String, nullable=True, index=True)

    # List of statistic groups (keys, headers, content, ...)
    statistics = Column(JSON, nullable=False)

    last_modified = Column(TIMESTAMP(timezone=True), nullable=False)
