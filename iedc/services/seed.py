"""Demo data loaded into a fresh store at startup."""

from __future__ import annotations

from datetime import date, datetime

from flask import current_app

from iedc.extensions import db
from iedc.models import (
    EventStatus,
    NotificationType,
    ResourceCategory,
    ResourceType,
    TargetAudience,
    UserRole,
    UserStatus,
)
from iedc.services.content import ContentStore
from iedc.services.directory import DirectoryStore
from iedc.services.repository import commit

SEED_USERS = [
    {
        'name': "Arjun Krishnan",
        'email': "arjun.k@kptciedc.edu",
        'role': UserRole.STUDENT,
        'status': UserStatus.ACTIVE,
        'join_date': date(2024, 1, 15),
        'department': "Computer Science",
        'phone': "+91 9876543210",
        'location': "Kollam, Kerala",
    },
    {
        'name': "Priya Nair",
        'email': "priya.n@kptciedc.edu",
        'role': UserRole.FACULTY,
        'status': UserStatus.ACTIVE,
        'join_date': date(2023, 8, 20),
        'department': "Electronics",
        'phone': "+91 9876543211",
        'location': "Thiruvananthapuram, Kerala",
    },
    {
        'name': "Ravi Kumar",
        'email': "ravi.k@kptciedc.edu",
        'role': UserRole.ADMIN,
        'status': UserStatus.ACTIVE,
        'join_date': date(2023, 5, 10),
        'department': "Administration",
        'phone': "+91 9876543212",
        'location': "Kochi, Kerala",
    },
    {
        'name': "Sneha Menon",
        'email': "sneha.m@kptciedc.edu",
        'role': UserRole.STUDENT,
        'status': UserStatus.PENDING,
        'join_date': date(2024, 11, 1),
        'department': "Mechanical",
        'phone': "+91 9876543213",
        'location': "Kottayam, Kerala",
    },
    {
        'name': "Anish Thomas",
        'email': "anish.t@kptciedc.edu",
        'role': UserRole.STUDENT,
        'status': UserStatus.INACTIVE,
        'join_date': date(2023, 12, 15),
        'department': "Civil",
        'phone': "+91 9876543214",
        'location': "Palakkad, Kerala",
    },
]

# (event fields, attendees, rating); the counters are set after creation
SEED_EVENTS = [
    ({
        'title': "Innovation Workshop 2024",
        'description': "A comprehensive workshop on innovation and entrepreneurship for students and faculty.",
        'date': "2024-12-15",
        'time': "10:00 AM",
        'location': "Main Auditorium, KPTC",
        'status': EventStatus.UPCOMING,
        'max_attendees': 100,
        'category': "Workshop",
        'organizer_id': 2,
        'image': "/placeholder.svg",
    }, 45, 4.8),
    ({
        'title': "Startup Pitch Competition",
        'description': "Annual startup pitch competition for emerging entrepreneurs.",
        'date': "2024-12-20",
        'time': "2:00 PM",
        'location': "Conference Hall A",
        'status': EventStatus.UPCOMING,
        'max_attendees': 80,
        'category': "Competition",
        'organizer_id': 3,
        'image': "/placeholder.svg",
    }, 67, 4.9),
    ({
        'title': "Tech Talk: AI in Education",
        'description': "Exploring the applications of artificial intelligence in modern education.",
        'date': "2024-11-25",
        'time': "3:30 PM",
        'location': "Virtual Event",
        'status': EventStatus.COMPLETED,
        'max_attendees': 100,
        'category': "Tech Talk",
        'organizer_id': 5,
        'image': "/placeholder.svg",
    }, 89, 4.7),
]

SEED_NOTIFICATIONS = [
    {
        'title': "Important: Semester Registration Open",
        'message': "Registration for the new semester is now open. Please complete your registration by December 30th.",
        'type': NotificationType.IMPORTANT,
        'is_active': True,
        'is_important': True,
        'target_audience': TargetAudience.STUDENTS,
        'expiry_date': datetime(2024, 12, 30),
        'created_by': 1,
    },
    {
        'title': "Innovation Workshop - Register Now",
        'message': "Join our innovation workshop on December 15th. Limited seats available!",
        'type': NotificationType.INFO,
        'is_active': True,
        'is_important': False,
        'target_audience': TargetAudience.ALL,
        'expiry_date': datetime(2024, 12, 15),
        'created_by': 1,
    },
    {
        'title': "Library Maintenance Notice",
        'message': "The library will be closed for maintenance on December 12th from 9 AM to 2 PM.",
        'type': NotificationType.WARNING,
        'is_active': True,
        'is_important': False,
        'target_audience': TargetAudience.STUDENTS,
        'expiry_date': datetime(2024, 12, 12),
        'created_by': 1,
    },
]

SEED_RESOURCES = [
    {
        'title': "Innovation Fundamentals Guide",
        'description': "Complete guide to understanding innovation and entrepreneurship basics",
        'type': ResourceType.PDF,
        'category': ResourceCategory.STUDY_MATERIAL,
        'url': "/resources/innovation-guide.pdf",
        'file_name': "innovation-guide.pdf",
        'file_size': 2048000,
        'upload_date': date(2024, 11, 1),
        'is_active': True,
        'priority': 5,
        'created_by': 1,
    },
    {
        'title': "Startup Business Plan Template",
        'description': "Professional template for creating business plans",
        'type': ResourceType.PDF,
        'category': ResourceCategory.STUDY_MATERIAL,
        'url': "/resources/business-plan-template.pdf",
        'file_name': "business-plan-template.pdf",
        'file_size': 1024000,
        'upload_date': date(2024, 11, 5),
        'is_active': True,
        'priority': 4,
        'created_by': 1,
    },
    {
        'title': "IEDC Innovation Lab",
        'description': "Virtual tour of our innovation laboratory",
        'type': ResourceType.IMAGE,
        'category': ResourceCategory.GALLERY,
        'url': "/images/innovation-lab.jpg",
        'file_name': "innovation-lab.jpg",
        'file_size': 512000,
        'upload_date': date(2024, 11, 10),
        'is_active': True,
        'priority': 3,
        'created_by': 1,
    },
    {
        'title': "Student Projects Showcase",
        'description': "Gallery of innovative student projects",
        'type': ResourceType.IMAGE,
        'category': ResourceCategory.GALLERY,
        'url': "/images/student-projects.jpg",
        'file_name': "student-projects.jpg",
        'file_size': 768000,
        'upload_date': date(2024, 11, 15),
        'is_active': True,
        'priority': 3,
        'created_by': 1,
    },
    {
        'title': "Kerala Startup Mission",
        'description': "Official website of Kerala Startup Mission",
        'type': ResourceType.LINK,
        'category': ResourceCategory.STUDY_MATERIAL,
        'url': "https://startupmission.kerala.gov.in",
        'upload_date': date(2024, 11, 20),
        'is_active': True,
        'priority': 2,
        'created_by': 1,
    },
]


def seed_directory(store: DirectoryStore) -> None:
    for data in SEED_USERS:
        store.create_user(data)

    for data, attendees, rating in SEED_EVENTS:
        event = store.create_event(data)
        if event is None:
            current_app.logger.warning(f"Skipping seed event {data['title']}: organizer missing")
            continue
        # Counters are adjusted in place, without an activity entry
        event.attendees = attendees
        event.rating = rating
    commit()


def seed_content(store: ContentStore) -> None:
    for data in SEED_NOTIFICATIONS:
        store.create_notification(data)
    for data in SEED_RESOURCES:
        store.create_resource(data)
    store.portal_settings()


def reset_store(directory: DirectoryStore, content: ContentStore, seed: bool = True) -> None:
    """Drop every table, recreate the schema and optionally load the demo data.

    Dropping the tables also resets the id sequences.
    """
    db.session.remove()
    db.drop_all()
    db.create_all()
    if seed:
        seed_directory(directory)
        seed_content(content)
        current_app.logger.info(
            f"Seeded {len(SEED_USERS)} users, {len(SEED_EVENTS)} events, "
            f"{len(SEED_NOTIFICATIONS)} notifications and {len(SEED_RESOURCES)} resources"
        )


__all__ = ["seed_directory", "seed_content", "reset_store"]
