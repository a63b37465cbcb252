from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                ("post_id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "title",
                    models.CharField(help_text="게시글 제목", max_length=255),
                ),
                ("content", models.TextField(help_text="게시글 본문")),
            ],
            options={
                "db_table": "board_post",
                "ordering": ["post_id"],
            },
        ),
    ]
