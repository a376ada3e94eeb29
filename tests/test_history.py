"""Tests for the history grouper and the history services."""

import logging

import pytest

from apps.reports.services import get_employee_history, get_my_history, group_history


class TestGroupHistory:

    def test_empty_input_gives_empty_list(self):
        assert group_history([]) == []

    def test_each_status_lands_in_its_bucket(self, fake_user, fake_task, at):
        user = fake_user(1)
        done = fake_task(user, 'completed', created_at=at(9))
        todo = fake_task(user, 'pending', created_at=at(10))
        blocked = fake_task(user, 'waiting', created_at=at(11), blocker_reason='infra')

        [bucket] = group_history([done, todo, blocked])

        assert [i['id'] for i in bucket['completed']] == [done.pk]
        assert [i['id'] for i in bucket['pending']] == [todo.pk]
        assert [i['id'] for i in bucket['blockers']] == [blocked.pk]
        assert bucket['blockers'][0]['blocker_reason'] == 'infra'

    def test_unknown_status_is_dropped_and_logged(self, fake_user, fake_task, at, caplog):
        user = fake_user(1)
        kept = fake_task(user, 'pending', created_at=at(9))
        odd = fake_task(user, 'archived', created_at=at(9))

        with caplog.at_level(logging.WARNING, logger='apps.reports.services'):
            history = group_history([kept, odd])

        ids = [i['id'] for b in history for key in ('completed', 'pending', 'blockers') for i in b[key]]
        assert ids == [kept.pk]
        assert 'skipped 1 task(s)' in caplog.text

    def test_flattening_recovers_every_task_once(self, fake_user, fake_task, at):
        user = fake_user(1)
        tasks = [
            fake_task(user, status, created_at=at(hour, days_ago=days_ago))
            for status, hour, days_ago in [
                ('pending', 9, 0), ('completed', 10, 0), ('waiting', 11, 1),
                ('pending', 12, 2), ('completed', 13, 2), ('bogus', 14, 3),
            ]
        ]

        history = group_history(tasks)

        ids = sorted(
            item['id'] for bucket in history
            for key in ('completed', 'pending', 'blockers') for item in bucket[key]
        )
        assert ids == sorted(t.pk for t in tasks if t.status != 'bogus')

    def test_buckets_sorted_newest_day_first(self, fake_user, fake_task, at):
        user = fake_user(1)
        tasks = [
            fake_task(user, created_at=at(9, days_ago=2)),
            fake_task(user, created_at=at(9, days_ago=0)),
            fake_task(user, created_at=at(9, days_ago=1)),
        ]

        history = group_history(tasks)

        assert [b['date'] for b in history] == [at(9), at(9, days_ago=1), at(9, days_ago=2)]

    def test_bucket_date_comes_from_first_task_seen(self, fake_user, fake_task, at):
        user = fake_user(1)
        early = fake_task(user, created_at=at(8))
        late = fake_task(user, created_at=at(18))

        [bucket] = group_history([early, late])

        assert bucket['date'] == at(8)
        assert len(bucket['pending']) == 2

    def test_bucket_date_taken_from_unrecognised_first_task(self, fake_user, fake_task, at):
        user = fake_user(1)
        odd = fake_task(user, 'archived', created_at=at(8))
        later = fake_task(user, 'pending', created_at=at(18))

        [bucket] = group_history([odd, later])

        assert bucket['date'] == at(8)
        assert [i['id'] for i in bucket['pending']] == [later.pk]

    def test_day_with_only_unrecognised_tasks_gives_empty_bucket(self, fake_user, fake_task, at):
        user = fake_user(1)
        odd = fake_task(user, 'archived', created_at=at(8))

        history = group_history([odd])

        assert history == [{'date': at(8), 'completed': [], 'pending': [], 'blockers': []}]

    def test_updated_at_only_projected_when_asked(self, fake_user, fake_task, at):
        user = fake_user(1)
        task = fake_task(user, created_at=at(9))

        assert 'updated_at' not in group_history([task])[0]['pending'][0]
        assert group_history([task], include_updated_at=True)[0]['pending'][0]['updated_at'] == at(9)


@pytest.mark.django_db
class TestHistoryServices:

    def test_my_history_only_contains_own_tasks(self, employee, other_employee, make_task, at):
        mine = make_task(employee, 'mine', created_at=at(9))
        make_task(other_employee, 'theirs', created_at=at(9))

        history = get_my_history(employee)

        assert [i['id'] for b in history for i in b['pending']] == [mine.pk]

    def test_my_history_buckets_by_local_day(self, employee, make_task, at):
        make_task(employee, 'today', created_at=at(9))
        make_task(employee, 'yesterday', status='completed', created_at=at(23, 30, days_ago=1))

        history = get_my_history(employee)

        assert len(history) == 2
        assert history[0]['pending'][0]['text'] == 'today'
        assert history[1]['completed'][0]['text'] == 'yesterday'

    def test_employee_history_respects_range(self, employee, make_task, at, now):
        recent = make_task(employee, 'recent', created_at=at(9, days_ago=3))
        make_task(employee, 'old', created_at=at(9, days_ago=10))

        history = get_employee_history(employee.pk, 'week', now)

        assert [i['id'] for b in history for i in b['pending']] == [recent.pk]
        assert history[0]['pending'][0]['updated_at'] == recent.updated_at

    def test_employee_history_day_means_today(self, employee, make_task, at, now):
        today = make_task(employee, 'today', created_at=at(8))
        make_task(employee, 'yesterday', created_at=at(20, days_ago=1))

        history = get_employee_history(employee.pk, 'day', now)

        assert [i['id'] for b in history for i in b['pending']] == [today.pk]

    def test_employee_history_ignores_other_users(self, employee, other_employee, make_task, at, now):
        make_task(other_employee, 'theirs', created_at=at(9))

        assert get_employee_history(employee.pk, 'week', now) == []
