from __future__ import annotations

from board.models import Post
from django.contrib import admin


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("post_id", "title")
    search_fields = ("title",)
    ordering = ("-post_id",)
