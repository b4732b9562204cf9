from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, ARRAY, UniqueConstraint, desc
from sqlalchemy.orm import relationship
from app.core.base import Base
from datetime import datetime


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(String, nullable=False)
    image = Column(String, default="", nullable=False)
    images = Column(ARRAY(String), default=list, nullable=False)
    video_url = Column(String, default="", nullable=False)
    video_thumbnail = Column(String, default="", nullable=False)
    tags = Column(ARRAY(String), default=list, nullable=False)  # ["#Taekwondo", "#Training"]
    date = Column(DateTime, default=datetime.utcnow, index=True)

    author = relationship("User", back_populates="posts", lazy="selectin")
    likes = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostLike.id",
        lazy="selectin",
    )
    comments = relationship(
        "PostComment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by=lambda: (desc(PostComment.date), desc(PostComment.id)),
        lazy="selectin",
    )


class PostLike(Base):
    __tablename__ = "post_likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),)

    id = Column(Integer, primary_key=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    post = relationship("Post", back_populates="likes")


class PostComment(Base):
    __tablename__ = "post_comments"

    id = Column(Integer, primary_key=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(String, nullable=False)
    # Снимок имени и аватара автора на момент комментария
    name = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    date = Column(DateTime, default=datetime.utcnow)

    post = relationship("Post", back_populates="comments")
