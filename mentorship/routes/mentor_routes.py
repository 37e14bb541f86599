import base64
import logging

import pydantic
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from mentorship.core.config import Settings, get_settings
from mentorship.core.errors import ValidationError, field_errors
from mentorship.database import get_db
from mentorship.models.mentor import Mentor
from mentorship.models.user import User
from mentorship.schemas.mentor import CreateMentorRequest, CreateMentorResponse, MentorResponse

router = APIRouter(tags=['mentors'])

logger = logging.getLogger(__name__)


def serialize_mentor(mentor: Mentor) -> dict:
    user = mentor.user
    return {
        'id': mentor.id,
        'email': mentor.email,
        'expertise': mentor.expertise,
        'educationalQualifications': mentor.educational_qualifications,
        'jobTitle': mentor.job_title,
        'experience': mentor.experience,
        'bio': mentor.bio,
        'profilePicture': mentor.profile_picture,
        'user': {
            'id': user.id,
            'firstName': user.first_name,
            'lastName': user.last_name,
        } if user else None,
    }


def encode_profile_picture(upload: UploadFile | None, max_bytes: int) -> str | None:
    if upload is None:
        return None

    content = upload.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise ValidationError(
            [{'field': 'profilePicture', 'message': f'Profile picture cannot exceed {max_bytes} bytes.'}]
        )
    if not content:
        return None
    return base64.b64encode(content).decode('ascii')


@router.post('/mentor', response_model=CreateMentorResponse)
def create_mentor(
    email: str | None = Form(default=None),
    expertise: str | None = Form(default=None),
    educational_qualifications: str | None = Form(default=None, alias='educationalQualifications'),
    job_title: str | None = Form(default=None, alias='jobTitle'),
    experience: str | None = Form(default=None),
    bio: str | None = Form(default=None),
    profile_picture: UploadFile | None = File(default=None, alias='profilePicture'),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    submitted = {
        'email': email,
        'expertise': expertise,
        'educationalQualifications': educational_qualifications,
        'jobTitle': job_title,
        'experience': experience,
        'bio': bio,
    }
    try:
        data = CreateMentorRequest.model_validate({key: value for key, value in submitted.items() if value is not None})
    except pydantic.ValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from exc

    if db.query(Mentor).filter(Mentor.email == data.email).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Mentor with this email already exists.',
        )

    user = db.query(User).filter(User.email == data.email).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='No user found with this email.',
        )

    mentor = Mentor(
        user_id=user.id,
        email=data.email,
        expertise=data.expertise,
        educational_qualifications=data.educational_qualifications,
        job_title=data.job_title,
        experience=data.experience,
        bio=data.bio,
        profile_picture=encode_profile_picture(profile_picture, settings.mentor_picture_max_bytes),
    )
    db.add(mentor)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Mentor with this email already exists.',
        ) from exc
    db.refresh(mentor)
    logger.info('Created mentor profile %s for user %s', mentor.id, user.id)

    return {'message': 'Mentor profile created successfully.', 'mentor': serialize_mentor(mentor)}


@router.get('/mentors', response_model=list[MentorResponse])
def list_mentors(db: Session = Depends(get_db)):
    mentors = db.query(Mentor).options(joinedload(Mentor.user)).order_by(Mentor.id).all()
    return [serialize_mentor(mentor) for mentor in mentors]
