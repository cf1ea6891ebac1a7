"""
Directory store tests: users, events, activity log and dashboard figures.

The store is seeded with five users (ids 1-5: active student, active faculty,
active admin, pending student, inactive student) and three events organized
by users 2, 3 and 5.
"""

from datetime import datetime

import pytest

from iedc.extensions import db
from iedc.models import Activity, ActivityTarget, EventStatus, UserRole, UserStatus
from iedc.services.activity import Actor
from iedc.services.directory import RegistrationNotPending


def new_user(**overrides):
    data = {
        'name': 'Meera Das',
        'email': 'meera.d@kptciedc.edu',
        'role': UserRole.STUDENT,
        'department': 'Computer Science',
        'phone': '+91 9000000001',
        'location': 'Kollam, Kerala',
    }
    data.update(overrides)
    return data


def new_event(**overrides):
    data = {
        'title': 'Hackathon',
        'description': 'Overnight build sprint',
        'date': '2025-01-10',
        'time': '9:00 AM',
        'location': 'Lab 2',
        'max_attendees': 40,
        'category': 'Competition',
        'organizer_id': 2,
    }
    data.update(overrides)
    return data


class TestUsers:
    """User CRUD through the store."""

    def test_create_defaults_to_pending(self, directory):
        user = directory.create_user(new_user())

        assert user.id == 6
        assert user.status == UserStatus.PENDING
        assert user.avatar == '/placeholder.svg'
        assert user.created_at == user.updated_at

    def test_ids_are_never_reused(self, directory):
        first = directory.create_user(new_user())
        assert directory.delete_user(first.id)

        second = directory.create_user(new_user(email='second@kptciedc.edu'))
        assert second.id > first.id

    def test_update_merges_partial(self, directory):
        before = directory.get_user(1).updated_at

        user = directory.update_user(1, {'phone': '+91 1111111111', 'id': 99})

        assert user.id == 1
        assert user.phone == '+91 1111111111'
        assert user.name == 'Arjun Krishnan'
        assert user.updated_at >= before

    def test_update_unknown_returns_none(self, directory):
        assert directory.update_user(999, {'name': 'Nobody'}) is None

    def test_delete_unknown_leaves_store_unchanged(self, directory):
        activities = directory.activity.count()

        assert directory.delete_user(999) is False
        assert directory.list_users()[1] == 5
        assert directory.activity.count() == activities

    def test_find_by_email_is_exact(self, directory):
        assert directory.find_user_by_email('priya.n@kptciedc.edu').id == 2
        assert directory.find_user_by_email('PRIYA.N@kptciedc.edu') is None

    def test_email_taken_excludes_self(self, directory):
        assert directory.email_taken('priya.n@kptciedc.edu')
        assert not directory.email_taken('priya.n@kptciedc.edu', exclude_id=2)


class TestUserFilters:
    """list_users filtering and pagination."""

    def test_search_is_case_insensitive(self, directory):
        users, total = directory.list_users(search='KUMAR')
        assert total == 1
        assert users[0].name == 'Ravi Kumar'

    def test_search_matches_department(self, directory):
        users, _ = directory.list_users(search='electro')
        assert [u.id for u in users] == [2]

    def test_role_filter(self, directory):
        users, total = directory.list_users(role='student')
        assert total == 3
        assert [u.id for u in users] == [1, 4, 5]

    def test_all_means_no_filter(self, directory):
        _, total = directory.list_users(role='all', status='all', department='all')
        assert total == 5

    def test_unknown_enum_value_matches_nothing(self, directory):
        assert directory.list_users(role='wizard') == ([], 0)

    def test_department_is_exact(self, directory):
        users, _ = directory.list_users(department='Civil')
        assert [u.name for u in users] == ['Anish Thomas']

    def test_filters_combine(self, directory):
        users, total = directory.list_users(role='student', status='active')
        assert total == 1
        assert users[0].id == 1

    def test_pagination_reports_unpaginated_total(self, directory):
        users, total = directory.list_users(page=2, page_size=2)
        assert total == 5
        assert [u.id for u in users] == [3, 4]

    def test_page_past_end_is_empty(self, directory):
        users, total = directory.list_users(page=9, page_size=10)
        assert users == []
        assert total == 5


class TestRegistrationReview:

    def test_approve_then_approve_again(self, directory):
        user = directory.review_registration(4, approve=True)
        assert user.status == UserStatus.ACTIVE

        with pytest.raises(RegistrationNotPending):
            directory.review_registration(4, approve=True)

    def test_reject_marks_inactive(self, directory):
        assert directory.review_registration(4, approve=False).status == UserStatus.INACTIVE

    def test_unknown_user(self, directory):
        assert directory.review_registration(999, approve=True) is None


class TestEvents:
    """Event CRUD and the organizer name snapshot."""

    def test_create_sets_counters_and_organizer(self, directory):
        event = directory.create_event(new_event())

        assert event.id == 4
        assert event.attendees == 0
        assert event.rating == 0
        assert event.status == EventStatus.UPCOMING
        assert event.organizer == 'Priya Nair'

        latest = directory.list_activities(1)[0]
        assert latest.action == 'Created new event: Hackathon'
        assert latest.user_id == 2

    def test_create_with_unknown_organizer_stores_nothing(self, directory):
        activities = directory.activity.count()

        assert directory.create_event(new_event(organizer_id=999)) is None
        assert directory.list_events()[1] == 3
        assert directory.activity.count() == activities

    def test_update_refreshes_organizer_snapshot(self, directory):
        event = directory.update_event(1, {'organizer_id': 1})
        assert event.organizer == 'Arjun Krishnan'

    def test_renaming_user_leaves_snapshot_alone(self, directory):
        directory.update_user(2, {'name': 'Priya N. Nair'})
        assert directory.get_event(1).organizer == 'Priya Nair'

    def test_deleting_organizer_does_not_cascade(self, directory):
        directory.delete_user(2)

        event = directory.get_event(1)
        assert event is not None
        assert event.organizer_id == 2

    def test_update_attributed_to_actor(self, directory):
        directory.update_event(2, {'title': 'Pitch Night'}, actor=Actor(id=3, name='Ravi Kumar'))

        latest = directory.list_activities(1)[0]
        assert latest.action == 'Updated event: Pitch Night'
        assert latest.user_name == 'Ravi Kumar'

    def test_delete_defaults_to_admin_actor(self, directory):
        assert directory.delete_event(3)

        latest = directory.list_activities(1)[0]
        assert latest.action == 'Deleted event: Tech Talk: AI in Education'
        assert (latest.user_id, latest.user_name) == (1, 'Admin')
        assert latest.target_type == ActivityTarget.EVENT

    def test_delete_unknown(self, directory):
        assert directory.delete_event(999) is False
        assert directory.list_events()[1] == 3


class TestEventFilters:

    def test_category_is_case_insensitive(self, directory):
        events, _ = directory.list_events(category='workshop')
        assert [e.id for e in events] == [1]

    def test_search_covers_organizer(self, directory):
        events, _ = directory.list_events(search='ravi')
        assert [e.id for e in events] == [2]

    def test_status_and_organizer(self, directory):
        events, _ = directory.list_events(status='completed', organizer_id=5)
        assert [e.id for e in events] == [3]

    def test_upcoming_events_limit(self, directory):
        assert [e.id for e in directory.upcoming_events(limit=1)] == [1]
        assert [e.id for e in directory.upcoming_events()] == [1, 2]


class TestActivityLog:

    def test_seed_activity(self, directory):
        activities = directory.list_activities(limit=50)
        assert len(activities) == 8

    def test_most_recent_first(self, directory):
        directory.delete_user(5)

        latest = directory.list_activities(limit=10)
        assert len(latest) == 9
        assert latest[0].action == 'Deleted user Anish Thomas'

    def test_user_changes_attributed_to_user(self, directory):
        directory.update_user(1, {'location': 'Kochi, Kerala'})

        latest = directory.list_activities(1)[0]
        assert latest.action == 'Updated user profile'
        assert (latest.user_id, latest.target_id) == (1, 1)

    def test_same_timestamp_keeps_insertion_order(self, directory):
        stamp = datetime(2100, 1, 1)
        for action in ('first', 'second'):
            db.session.add(Activity(
                user_id=1,
                user_name='Admin',
                action=action,
                target_type=ActivityTarget.SYSTEM,
                timestamp=stamp,
            ))
        db.session.commit()

        assert [a.action for a in directory.list_activities(2)] == ['first', 'second']


class TestDashboardStats:

    def test_seeded_counts(self, directory):
        stats = directory.dashboard_stats()

        assert stats['totalUsers'] == 5
        assert stats['activeUsers'] == 3
        assert stats['pendingUsers'] == 1
        assert stats['inactiveUsers'] == 1
        assert stats['totalEvents'] == 3
        assert stats['upcomingEvents'] == 2
        assert stats['ongoingEvents'] == 0
        assert stats['completedEvents'] == 1
        assert stats['totalRevenue'] == 45680
        assert stats['monthlyGrowth'] == 23.4

    def test_counts_follow_approval(self, directory):
        directory.review_registration(4, approve=True)

        stats = directory.dashboard_stats()
        assert stats['pendingUsers'] == 0
        assert stats['activeUsers'] == 4
