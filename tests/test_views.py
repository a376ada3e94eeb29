"""Request-level tests for the JSON endpoints."""

import json

import pytest
from django.urls import reverse

from apps.status_updates.models import StatusSnapshot
from apps.tasks.models import Task

pytestmark = pytest.mark.django_db


def put_json(client, url, payload):
    return client.put(url, data=json.dumps(payload), content_type='application/json')


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


@pytest.fixture
def employee_client(client, employee):
    client.force_login(employee)
    return client


@pytest.fixture
def manager_client(client, manager):
    client.force_login(manager)
    return client


class TestAuthentication:

    @pytest.mark.parametrize('name', [
        'tasks:task_collection', 'tasks:my_history', 'status_updates:today_status',
        'reports:team_board', 'reports:pending_report',
    ])
    def test_anonymous_is_redirected_to_login(self, client, name):
        response = client.get(reverse(name))

        assert response.status_code == 302
        assert reverse('admin:login') in response['Location']

    @pytest.mark.parametrize('name', [
        'reports:team_board', 'reports:pending_report',
        'status_updates:team_statuses', 'accounts:employee_list',
    ])
    def test_employee_gets_403_on_manager_endpoints(self, employee_client, name):
        response = employee_client.get(reverse(name))

        assert response.status_code == 403
        assert response.json() == {'message': 'Not authorized as a manager'}


class TestTaskEndpoints:

    def test_create_and_list_today(self, employee_client, employee):
        url = reverse('tasks:task_collection')

        response = post_json(employee_client, url, {'text': 'Write docs'})

        assert response.status_code == 201
        body = response.json()
        assert body['text'] == 'Write docs'
        assert body['status'] == 'pending'
        assert body['user'] == employee.pk

        listed = employee_client.get(url).json()
        assert [t['id'] for t in listed] == [body['id']]

    def test_create_without_text_is_400(self, employee_client):
        response = post_json(employee_client, reverse('tasks:task_collection'), {'text': ''})

        assert response.status_code == 400
        assert response.json() == {'message': 'Please add a task description'}

    def test_malformed_json_is_400(self, employee_client):
        response = employee_client.post(
            reverse('tasks:task_collection'), data='{not json', content_type='application/json'
        )

        assert response.status_code == 400

    def test_update_own_task(self, employee_client, employee, make_task):
        task = make_task(employee, 'deploy')

        response = put_json(
            employee_client, reverse('tasks:task_item', args=[task.pk]),
            {'status': 'waiting', 'blocker_reason': 'no access'},
        )

        assert response.status_code == 200
        assert response.json()['status'] == 'waiting'
        task.refresh_from_db()
        assert task.blocker_reason == 'no access'
        assert task.text == 'deploy'

    def test_update_missing_task_is_404(self, employee_client):
        response = put_json(employee_client, reverse('tasks:task_item', args=[424242]), {'text': 'x'})

        assert response.status_code == 404
        assert response.json() == {'message': 'Task not found with ID: 424242'}

    def test_update_someone_elses_task_is_403(self, client, employee, other_employee, make_task):
        task = make_task(employee, 'mine')
        client.force_login(other_employee)

        response = put_json(client, reverse('tasks:task_item', args=[task.pk]), {'text': 'x'})

        assert response.status_code == 403
        assert response.json() == {'message': 'User not authorized'}

    def test_invalid_status_is_400(self, employee_client, employee, make_task):
        task = make_task(employee)

        response = put_json(
            employee_client, reverse('tasks:task_item', args=[task.pk]), {'status': 'archived'}
        )

        assert response.status_code == 400

    def test_manager_reply(self, manager_client, employee, make_task):
        task = make_task(employee, 'deploy')

        response = put_json(
            manager_client, reverse('tasks:task_item', args=[task.pk]),
            {'manager_reply': 'Escalated to infra'},
        )

        assert response.status_code == 200
        body = response.json()
        assert body['manager_reply'] == 'Escalated to infra'
        assert body['manager_reply_at'] is not None

    def test_delete_own_task(self, employee_client, employee, make_task):
        task = make_task(employee)

        response = employee_client.delete(reverse('tasks:task_item', args=[task.pk]))

        assert response.status_code == 200
        assert response.json() == {'id': task.pk}
        assert not Task.objects.filter(pk=task.pk).exists()

    def test_delete_by_non_owner_is_403(self, manager_client, employee, make_task):
        task = make_task(employee)

        response = manager_client.delete(reverse('tasks:task_item', args=[task.pk]))

        assert response.status_code == 403
        assert Task.objects.filter(pk=task.pk).exists()

    def test_assign(self, manager_client, manager, employee):
        response = post_json(manager_client, reverse('tasks:task_assign'), {
            'text': 'Prepare slides', 'user': employee.pk, 'deadline': 'Friday',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['user'] == employee.pk
        assert body['assigned_by'] == manager.pk
        assert body['is_assigned'] is True

    def test_assign_requires_text_and_user(self, manager_client):
        response = post_json(manager_client, reverse('tasks:task_assign'), {})

        assert response.status_code == 400
        assert response.json() == {'message': 'Please add text and select a user.'}

    def test_history_groups_by_day(self, employee_client, employee, make_task, at):
        make_task(employee, 'today', created_at=at(9))
        make_task(employee, 'earlier', status='completed', created_at=at(9, days_ago=2))

        history = employee_client.get(reverse('tasks:my_history')).json()

        assert len(history) == 2
        assert history[0]['pending'][0]['text'] == 'today'
        assert history[1]['completed'][0]['text'] == 'earlier'


class TestStatusEndpoints:

    def test_save_then_overwrite(self, employee_client, employee):
        url = reverse('status_updates:save_status')

        first = post_json(employee_client, url, {'completed': ['a'], 'pending': [], 'blockers': []})
        second = post_json(employee_client, url, {'completed': ['a', 'b']})

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()['id'] == first.json()['id']
        assert second.json()['completed'] == ['a', 'b']
        assert StatusSnapshot.objects.filter(user=employee).count() == 1

    def test_save_rejects_non_list(self, employee_client):
        response = post_json(
            employee_client, reverse('status_updates:save_status'), {'completed': 'done'}
        )

        assert response.status_code == 400

    def test_today_is_null_before_saving(self, employee_client):
        response = employee_client.get(reverse('status_updates:today_status'))

        assert response.status_code == 200
        assert response.json() is None

    def test_team_statuses_include_owner(self, client, employee, manager):
        client.force_login(employee)
        post_json(client, reverse('status_updates:save_status'), {'completed': ['x']})
        client.force_login(manager)

        [row] = client.get(reverse('status_updates:team_statuses')).json()

        assert row['user'] == {
            'id': employee.pk, 'name': employee.get_full_name(), 'email': employee.email,
        }


class TestReportEndpoints:

    def test_team_board_lists_every_employee(self, manager_client, employee, other_employee,
                                             make_task):
        make_task(employee, 'fresh')

        rows = manager_client.get(reverse('reports:team_board')).json()

        assert [r['employee']['id'] for r in rows] == [employee.pk, other_employee.pk]
        assert rows[0]['is_missing'] is False
        assert rows[1]['is_missing'] is True
        assert rows[1]['last_activity'] is None

    def test_pending_report_with_range(self, manager_client, employee, make_task):
        make_task(employee, 'outstanding')
        make_task(employee, 'finished', status='completed')

        rows = manager_client.get(reverse('reports:pending_report'), {'range': 'day'}).json()

        assert rows == [{
            'employee': {'id': employee.pk, 'name': employee.get_full_name(), 'email': employee.email},
            'tasks': [{
                'text': 'outstanding', 'status': 'pending',
                'date': rows[0]['tasks'][0]['date'], 'reason': '',
            }],
        }]

    def test_employee_history(self, manager_client, employee, make_task):
        task = make_task(employee, 'logged')

        history = manager_client.get(
            reverse('reports:employee_history', args=[employee.pk]), {'range': 'month'}
        ).json()

        assert history[0]['pending'][0]['id'] == task.pk
        assert 'updated_at' in history[0]['pending'][0]

    def test_employee_list(self, manager_client, employee, other_employee):
        response = manager_client.get(reverse('accounts:employee_list'))

        assert response.status_code == 200
        assert {e['id'] for e in response.json()} == {employee.pk, other_employee.pk}
