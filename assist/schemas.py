# assist/schemas.py

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field

"""
Shapes of what goes into and comes out of the two AI flows. Model
replies are validated against the *Draft / Output models before
anything reaches a page, so a malformed reply fails here and not in a
template.
"""

Tone = Literal['friendly', 'professional', 'enthusiastic', 'technical', 'simple']


class RecommendationInput(BaseModel):
    user_profile: str = ''
    location: str = ''
    past_activity: str = ''
    availability: str = ''


class AvailableSession(BaseModel):
    id: str
    title: str = 'N/A'
    description: str = 'N/A'
    category: str = 'N/A'
    location: str = 'N/A'
    date_time: str = 'Date TBD'
    price: float = 0


class Recommendation(BaseModel):
    # Models sometimes echo the camelCase keys of the prompt examples
    session_id: str = Field(validation_alias=AliasChoices('session_id', 'sessionId'))
    title: str
    description: str = ''
    category: str = ''
    teacher: str = 'Provided by Teacher'
    location: str = ''
    date_time: str = Field(default='', validation_alias=AliasChoices('date_time', 'dateTime'))
    price: float = 0


class RecommendationDraft(BaseModel):
    """The model's reply before ids are checked and reasoning filled in."""

    recommendations: List[Recommendation] = Field(default_factory=list)
    reasoning: Optional[str] = None


class RecommendationOutput(BaseModel):
    recommendations: List[Recommendation] = Field(default_factory=list)
    reasoning: str = Field(min_length=1)


class ContentInput(BaseModel):
    session_topic: str = Field(min_length=3)
    keywords: Optional[str] = None
    target_audience: Optional[str] = None
    current_draft_title: Optional[str] = None
    current_draft_description: Optional[str] = None
    desired_tone: Optional[Tone] = None


class ContentOutput(BaseModel):
    suggested_titles: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices('suggested_titles', 'suggestedTitles'),
    )
    suggested_descriptions: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices('suggested_descriptions', 'suggestedDescriptions'),
    )
    tips_for_engagement: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices('tips_for_engagement', 'tipsForEngagement'),
    )
