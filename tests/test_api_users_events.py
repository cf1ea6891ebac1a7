"""HTTP tests for the user and event endpoints."""


NEW_USER = {
    'name': 'Meera Das',
    'email': 'meera.d@kptciedc.edu',
    'role': 'student',
    'department': 'Computer Science',
    'phone': '+91 9000000001',
    'location': 'Kollam, Kerala',
}

NEW_EVENT = {
    'title': 'Hackathon',
    'description': 'Overnight build sprint',
    'date': '2025-01-10',
    'time': '9:00 AM',
    'location': 'Lab 2',
    'maxAttendees': 40,
    'category': 'Competition',
    'organizerId': 2,
}


class TestUserEndpoints:

    def test_list_defaults(self, client):
        response = client.get('/api/users')
        assert response.status_code == 200

        body = response.get_json()
        assert body['success'] is True
        assert body['data']['total'] == 5
        assert body['data']['page'] == 1
        assert body['data']['pageSize'] == 10
        assert [u['id'] for u in body['data']['users']] == [1, 2, 3, 4, 5]

    def test_list_filters_and_pages(self, client):
        body = client.get('/api/users?role=student&page=2&pageSize=2').get_json()

        assert body['data']['total'] == 3
        assert [u['id'] for u in body['data']['users']] == [5]
        assert body['data']['pageSize'] == 2

    def test_non_numeric_paging_falls_back(self, client):
        body = client.get('/api/users?page=abc&pageSize=-3').get_json()
        assert body['data']['page'] == 1
        assert body['data']['pageSize'] == 10

    def test_user_shape(self, client):
        user = client.get('/api/users/2').get_json()['data']

        assert user['name'] == 'Priya Nair'
        assert user['role'] == 'faculty'
        assert user['joinDate'] == '2023-08-20'
        assert user['createdAt'].endswith('Z')

    def test_get_bad_and_unknown_ids(self, client):
        response = client.get('/api/users/abc')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid user ID'

        response = client.get('/api/users/999')
        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'error': 'User not found'}

    def test_create_user(self, client):
        response = client.post('/api/users', json=NEW_USER)
        assert response.status_code == 201

        body = response.get_json()
        assert body['message'] == 'User created successfully'
        assert body['data']['id'] == 6
        assert body['data']['status'] == 'pending'
        assert body['data']['avatar'] == '/placeholder.svg'

    def test_create_duplicate_email(self, client):
        response = client.post('/api/users', json={**NEW_USER, 'email': 'priya.n@kptciedc.edu'})
        assert response.status_code == 409
        assert response.get_json()['error'] == 'Email already exists'
        assert client.get('/api/users').get_json()['data']['total'] == 5

    def test_create_validation_failure(self, client):
        response = client.post('/api/users', json={**NEW_USER, 'email': 'not-an-email', 'role': 'wizard'})
        assert response.status_code == 400

        body = response.get_json()
        assert body['error'] == 'Validation failed'
        assert 'email' in body['message']
        assert 'role' in body['message']

    def test_malformed_json_is_validation_failure(self, client):
        response = client.post('/api/users', data='{not json', content_type='application/json')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Validation failed'

    def test_update_user(self, client):
        response = client.put('/api/users/1', json={'location': 'Kochi, Kerala', 'name': None})
        assert response.status_code == 200

        user = response.get_json()['data']
        assert user['location'] == 'Kochi, Kerala'
        assert user['name'] == 'Arjun Krishnan'

    def test_update_email_conflict(self, client):
        response = client.put('/api/users/1', json={'email': 'priya.n@kptciedc.edu'})
        assert response.status_code == 409

        response = client.put('/api/users/2', json={'email': 'priya.n@kptciedc.edu'})
        assert response.status_code == 200

    def test_update_unknown(self, client):
        assert client.put('/api/users/999', json={'name': 'Nobody'}).status_code == 404
        assert client.put('/api/users/x', json={'name': 'Nobody'}).status_code == 400

    def test_delete_user(self, client):
        response = client.delete('/api/users/5')
        assert response.status_code == 200
        assert response.get_json()['message'] == 'User deleted successfully'

        assert client.get('/api/users/5').status_code == 404
        assert client.delete('/api/users/5').status_code == 404

    def test_delete_attributed_to_caller(self, client, auth_headers):
        client.delete('/api/users/5', headers=auth_headers(0))

        activity = client.get('/api/dashboard/activities?limit=1').get_json()['data']['activities'][0]
        assert activity['action'] == 'Deleted user Anish Thomas'
        assert activity['userId'] == 0
        assert activity['userName'] == 'Admin User'


class TestEventEndpoints:

    def test_list_events(self, client):
        body = client.get('/api/events').get_json()
        assert body['data']['total'] == 3
        assert [e['id'] for e in body['data']['events']] == [1, 2, 3]

    def test_list_filters(self, client):
        body = client.get('/api/events?category=WORKSHOP').get_json()
        assert [e['id'] for e in body['data']['events']] == [1]

        body = client.get('/api/events?organizerId=5&status=completed').get_json()
        assert [e['id'] for e in body['data']['events']] == [3]

        body = client.get('/api/events?status=all&search=pitch').get_json()
        assert [e['id'] for e in body['data']['events']] == [2]

    def test_event_shape(self, client):
        event = client.get('/api/events/1').get_json()['data']

        assert event['organizer'] == 'Priya Nair'
        assert event['organizerId'] == 2
        assert event['attendees'] == 45
        assert event['maxAttendees'] == 100
        assert event['rating'] == 4.8
        assert event['status'] == 'upcoming'

    def test_create_event(self, client):
        response = client.post('/api/events', json=NEW_EVENT)
        assert response.status_code == 201

        event = response.get_json()['data']
        assert event['id'] == 4
        assert event['organizer'] == 'Priya Nair'
        assert event['attendees'] == 0
        assert event['rating'] == 0
        assert event['image'] == '/placeholder.svg'

    def test_create_with_unknown_organizer(self, client):
        response = client.post('/api/events', json={**NEW_EVENT, 'organizerId': 999})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Organizer not found'
        assert client.get('/api/events').get_json()['data']['total'] == 3

    def test_create_rejects_zero_capacity(self, client):
        response = client.post('/api/events', json={**NEW_EVENT, 'maxAttendees': 0})
        assert response.status_code == 400
        assert 'maxAttendees' in response.get_json()['message']

    def test_create_rejects_numeric_strings(self, client):
        response = client.post('/api/events', json={**NEW_EVENT, 'maxAttendees': '50', 'organizerId': '2'})
        assert response.status_code == 400

        body = response.get_json()
        assert body['error'] == 'Validation failed'
        assert 'maxAttendees' in body['message']
        assert 'organizerId' in body['message']
        assert client.get('/api/events').get_json()['data']['total'] == 3

    def test_update_event(self, client):
        response = client.put('/api/events/2', json={'organizerId': 1, 'status': 'ongoing'})
        assert response.status_code == 200

        event = response.get_json()['data']
        assert event['organizer'] == 'Arjun Krishnan'
        assert event['status'] == 'ongoing'
        assert event['attendees'] == 67

    def test_update_errors(self, client):
        response = client.put('/api/events/2', json={'organizerId': 999})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Organizer not found'

        assert client.put('/api/events/999', json={'title': 'Ghost'}).status_code == 404
        assert client.put('/api/events/abc', json={'title': 'Ghost'}).status_code == 400
        assert client.put('/api/events/1', json={'rating': 7}).status_code == 400

    def test_delete_event(self, client):
        assert client.delete('/api/events/3').status_code == 200
        assert client.get('/api/events/3').status_code == 404
        assert client.delete('/api/events/3').status_code == 404
        assert client.delete('/api/events/abc').get_json()['error'] == 'Invalid event ID'
