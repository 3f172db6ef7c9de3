import logging

from accounts.exceptions import ForbiddenError

from .models import Idea
from .validators import validate_idea

logger = logging.getLogger(__name__)


def ensure_owner(idea, actor, verb):
    if idea.user_id != actor.id:
        logger.warning('User %s tried to %s idea %s owned by %s', actor.id, verb, idea.pk, idea.user_id)
        raise ForbiddenError(f'Not authorized to {verb} this idea')


def create_idea(data, actor):
    fields = validate_idea(data)
    idea = Idea.objects.create(user_id=actor.id, **fields)
    logger.info('Idea %s created by user %s', idea.pk, actor.id)
    return idea


def update_idea(idea, data, actor, partial=False):
    ensure_owner(idea, actor, 'update')
    fields = validate_idea(data, partial=partial)
    for attr, value in fields.items():
        setattr(idea, attr, value)
    idea.save()
    logger.info('Idea %s updated by user %s', idea.pk, actor.id)
    return idea


def delete_idea(idea, actor):
    ensure_owner(idea, actor, 'delete')
    idea_id = idea.pk
    idea.delete()
    logger.info('Idea %s deleted by user %s', idea_id, actor.id)
