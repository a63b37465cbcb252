from typing import List

from pydantic import BaseModel, Field


class PostResponseDTO(BaseModel):
    """
    게시글 응답 DTO (등록/조회/수정 공통)
    """

    post_id: int = Field(description="게시글 ID")
    title: str = Field(description="게시글 제목")
    content: str = Field(description="게시글 본문")


class DeletePostResponseDTO(BaseModel):
    post_id: int = Field(description="삭제된 게시글 ID")


class PostPageResponseDTO(BaseModel):
    """
    게시글 목록(페이지) 응답 DTO
    """

    items: List[PostResponseDTO] = Field(default_factory=list)
    total_elements: int = Field(ge=0, description="전체 게시글 수")
    total_pages: int = Field(ge=0, description="전체 페이지 수")
    page_index: int = Field(ge=0, description="현재 페이지 (0부터 시작)")
    page_size: int = Field(ge=1, description="페이지 크기")
