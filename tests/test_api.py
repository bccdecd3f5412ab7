"""HTTP layer: auth guard, study, tests and leaderboard endpoints."""
import pytest
from rest_framework.test import APIClient

from quizzes.models import Assessment, Question
from study.models import MemoryState

pytestmark = pytest.mark.django_db


class TestAuthRequired:

    @pytest.mark.parametrize('method, url', [
        ('get', '/api/study/today/'),
        ('get', '/api/study/progress/'),
        ('post', '/api/tests/start/'),
        ('get', '/api/tests/history/'),
        ('get', '/api/leaderboard/'),
        ('get', '/api/users/me/'),
    ])
    def test_anonymous_is_rejected(self, method, url):
        resp = getattr(APIClient(), method)(url)
        assert resp.status_code == 401


class TestWordsApi:

    def test_words_are_public(self):
        resp = APIClient().get('/api/words/')
        assert resp.status_code == 200
        assert resp.json()[0]['english'] == 'cat'

    def test_categories(self):
        resp = APIClient().get('/api/words/categories/')
        assert 'animals' in resp.json()['categories']

    def test_words_by_category(self):
        resp = APIClient().get('/api/words/category/food/')
        assert resp.status_code == 200
        assert {w['category'] for w in resp.json()} == {'food'}


class TestStudyApi:

    def test_today_words(self, api_client, user):
        resp = api_client.get('/api/study/today/?limit=3')

        assert resp.status_code == 200
        assert [w['id'] for w in resp.json()] == [1, 2, 3]
        assert MemoryState.objects.filter(user=user).count() == 3

    def test_default_limit_comes_from_settings(self, api_client, user):
        prefs = user.learning_settings
        prefs.daily_words = 4
        prefs.save()

        resp = api_client.get('/api/study/today/')

        assert len(resp.json()) == 4

    def test_preferred_category(self, api_client, user):
        prefs = user.learning_settings
        prefs.preferred_category = 'food'
        prefs.save()

        resp = api_client.get('/api/study/today/?limit=2')

        assert {w['category'] for w in resp.json()} == {'food'}

    def test_bad_limit(self, api_client):
        resp = api_client.get('/api/study/today/?limit=abc')
        assert resp.status_code == 400

    def test_progress(self, api_client):
        api_client.get('/api/study/today/?limit=2')

        resp = api_client.get('/api/study/progress/')

        body = resp.json()
        assert body['total'] == 2
        assert body['due'] == 2
        assert body['learned'] == 0
        assert body['words'][0]['word']['english'] in ('cat', 'dog')


class TestQuizApi:

    def test_full_round(self, api_client, user):
        start = api_client.post('/api/tests/start/', {'type': 'quick'}, format='json')
        assert start.status_code == 200
        test = start.json()
        assert test['totalQuestions'] == 10
        assert test['finishedAt'] is None
        assert len(test['questions']) == 10

        for q in test['questions'][:7]:
            word = q['word']
            answer = word['uzbek'] if q['questionType'] == 'en_to_uz' else word['english']
            resp = api_client.post(
                f"/api/tests/{test['id']}/answer/",
                {'questionId': q['id'], 'userAnswer': f'  {answer.upper()} '},
                format='json',
            )
            assert resp.json()['isCorrect'] is True

        finish = api_client.post(f"/api/tests/{test['id']}/finish/")
        assert finish.json() == {
            'testId': test['id'],
            'totalQuestions': 10,
            'correctAnswers': 7,
            'percent': 70.0,
            'score': 70,
        }

        again = api_client.post(f"/api/tests/{test['id']}/finish/")
        assert again.status_code == 409

        history = api_client.get('/api/tests/history/').json()
        assert history['results'][0]['score'] == 70

        board = api_client.get('/api/leaderboard/?range=week').json()
        assert board['currentUser'] == {'position': 1, 'totalScore': 70}

    def test_word_count(self, api_client):
        resp = api_client.post('/api/tests/start/', {'type': 'quick', 'wordCount': 3}, format='json')
        assert resp.json()['totalQuestions'] == 3

    def test_negative_word_count_gives_empty_test(self, api_client):
        resp = api_client.post('/api/tests/start/', {'type': 'quick', 'wordCount': -1}, format='json')

        assert resp.status_code == 200
        assert resp.json()['totalQuestions'] == 0
        assert resp.json()['questions'] == []

    def test_answer_to_foreign_question(self, api_client, user):
        test_a = Assessment.objects.create(user=user, total_questions=1)
        test_b = Assessment.objects.create(user=user, total_questions=1)
        question = Question.objects.create(test=test_a, word_id=1, question_type='en_to_uz')

        resp = api_client.post(
            f'/api/tests/{test_b.id}/answer/',
            {'questionId': question.id, 'userAnswer': 'mushuk'},
            format='json',
        )

        assert resp.status_code == 404

    def test_other_users_test_is_hidden(self, api_client, make_user):
        other = make_user()
        test = Assessment.objects.create(user=other, total_questions=0)

        assert api_client.post(f'/api/tests/{test.id}/finish/').status_code == 404

    def test_missing_answer_field(self, api_client, user):
        test = Assessment.objects.create(user=user, total_questions=0)
        resp = api_client.post(f'/api/tests/{test.id}/answer/', {'questionId': 1}, format='json')
        assert resp.status_code == 400


class TestLeaderboardApi:

    def test_default_range_is_week(self, api_client):
        body = api_client.get('/api/leaderboard/').json()
        assert body['range'] == 'week'
        assert body['leaderboard'] == []
        assert body['currentUser'] == {'position': None, 'totalScore': 0}
