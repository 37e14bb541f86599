from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from mentorship.schemas.auth import normalize_email

EXPERIENCE_LEVELS = ('0-3 years', '3-10 years', '10+ years')
MAX_BIO_LENGTH = 500


class CreateMentorRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    expertise: str
    educational_qualifications: str = Field(alias='educationalQualifications')
    job_title: str = Field(alias='jobTitle')
    experience: str
    bio: str

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, value):
        return normalize_email(value)

    @field_validator('expertise', 'educational_qualifications', 'job_title')
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('This field is required.')
        return normalized

    @field_validator('experience')
    @classmethod
    def validate_experience(cls, value: str) -> str:
        normalized = value.strip()
        if normalized not in EXPERIENCE_LEVELS:
            raise ValueError(f"Experience must be one of {', '.join(EXPERIENCE_LEVELS)}.")
        return normalized

    @field_validator('bio')
    @classmethod
    def validate_bio(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Bio is required.')
        if len(normalized) > MAX_BIO_LENGTH:
            raise ValueError(f'Bio cannot exceed {MAX_BIO_LENGTH} characters.')
        return normalized


class MentorUserResponse(BaseModel):
    id: int
    firstName: str
    lastName: str


class MentorResponse(BaseModel):
    id: int
    email: str
    expertise: str
    educationalQualifications: str
    jobTitle: str
    experience: str
    bio: str
    profilePicture: str | None = None
    user: MentorUserResponse | None = None


class CreateMentorResponse(BaseModel):
    message: str
    mentor: MentorResponse
