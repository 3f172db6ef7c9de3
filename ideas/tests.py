from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.actor import ActorContext
from accounts.exceptions import ForbiddenError, ValidationError
from accounts.models import User
from ideas.models import Idea
from ideas.services import create_idea, delete_idea, update_idea
from ideas.validators import normalize_tags, validate_idea


class IdeaValidatorTests(SimpleTestCase):
    def test_comma_separated_tags_keep_duplicates(self):
        self.assertEqual(normalize_tags('a, b, b, '), ['a', 'b', 'b'])

    def test_list_tags_are_trimmed(self):
        self.assertEqual(normalize_tags([' x ', '', 'y']), ['x', 'y'])
        self.assertEqual(normalize_tags(None), [])
        self.assertEqual(normalize_tags(7), [])

    def test_title_summary_description_required(self):
        with self.assertRaisesMessage(ValidationError, 'Title, summary and description are required'):
            validate_idea({'title': 'T', 'summary': ' ', 'description': 'D'})


class IdeaOwnershipTests(TestCase):
    def setUp(self):
        self.owner = User.objects.create_user(username='owner', password='pass')
        self.other = User.objects.create_user(username='other', password='pass')
        self.owner_actor = ActorContext.from_user(self.owner)
        self.other_actor = ActorContext.from_user(self.other)
        self.idea = create_idea(
            {'title': ' Flexible hours ', 'summary': 'Summary', 'description': 'Details', 'tags': 'hr, time'},
            self.owner_actor,
        )

    def test_create_sets_owner_and_trims(self):
        self.assertEqual(self.idea.user, self.owner)
        self.assertEqual(self.idea.title, 'Flexible hours')
        self.assertEqual(self.idea.tags, ['hr', 'time'])

    def test_non_owner_cannot_update_or_delete(self):
        with self.assertRaisesMessage(ForbiddenError, 'Not authorized to update this idea'):
            update_idea(self.idea, {'title': 'Mine'}, self.other_actor, partial=True)
        with self.assertRaisesMessage(ForbiddenError, 'Not authorized to delete this idea'):
            delete_idea(self.idea, self.other_actor)
        self.assertTrue(Idea.objects.filter(pk=self.idea.pk).exists())

    def test_ownership_checked_before_input(self):
        with self.assertRaises(ForbiddenError):
            update_idea(self.idea, {}, self.other_actor)

    def test_owner_can_update_and_delete(self):
        update_idea(
            self.idea,
            {'title': 'Remote days', 'summary': 'S', 'description': 'D', 'tags': ['remote']},
            self.owner_actor,
        )
        self.idea.refresh_from_db()
        self.assertEqual(self.idea.tags, ['remote'])
        delete_idea(self.idea, self.owner_actor)
        self.assertFalse(Idea.objects.exists())

    def test_full_update_without_tags_clears_them(self):
        update_idea(self.idea, {'title': 'T', 'summary': 'S', 'description': 'D'}, self.owner_actor)
        self.idea.refresh_from_db()
        self.assertEqual(self.idea.tags, [])


class IdeaEndpointTests(APITestCase):
    def setUp(self):
        self.owner = User.objects.create_user(username='owner', password='pass')
        self.other = User.objects.create_user(username='other', password='pass')
        for index in range(3):
            Idea.objects.create(title=f'Idea {index}', summary='S', description='D', user=self.owner)

    def test_reading_is_public(self):
        response = self.client.get('/api/ideas/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 3)

        response = self.client.get('/api/ideas/', {'_limit': '2'})
        self.assertEqual(len(response.data['data']), 2)

    def test_writing_requires_login(self):
        response = self.client.post('/api/ideas/', {'title': 'T', 'summary': 'S', 'description': 'D'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_and_forbidden_delete(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.post(
            '/api/ideas/',
            {'title': 'T', 'summary': 'S', 'description': 'D', 'tags': 'a, b, b, '},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['tags'], ['a', 'b', 'b'])
        idea_id = response.data['data']['id']

        self.client.force_authenticate(user=self.other)
        response = self.client.delete(f'/api/ideas/{idea_id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['kind'], 'ForbiddenError')
        self.assertEqual(response.data['message'], 'Not authorized to delete this idea')

    def test_missing_idea(self):
        response = self.client.get('/api/ideas/123/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Idea Not Found')
