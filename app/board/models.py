from django.db import models


class Post(models.Model):
    """
    게시글 테이블.

    도메인 로직은 board.domain.post.Post 에 있고,
    이 모델은 DjangoPostStore 를 통해서만 읽고 씁니다.
    """

    post_id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=255, help_text="게시글 제목")
    content = models.TextField(help_text="게시글 본문")

    class Meta:
        db_table = "board_post"
        ordering = ["post_id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Post {self.post_id} ({self.title})"
