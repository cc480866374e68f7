"""
Student view: enrollments grouped by contact identity, computed per request.
"""
import hashlib
import re
from typing import Any, Dict, List, Tuple

from models.enrollment import EnrollmentStatus


def contact_identity(enrollment: Dict[str, Any]) -> Tuple[str, str, str]:
    """Normalized (name, email, phone) used to recognise repeat enrollments"""
    name = " ".join(str(enrollment.get('studentName') or '').split()).lower()
    email = str(enrollment.get('email') or '').strip().lower()
    phone = re.sub(r"\D", "", str(enrollment.get('phone') or ''))
    return name, email, phone


def student_id(identity: Tuple[str, str, str]) -> str:
    return hashlib.sha1("|".join(identity).encode("utf-8")).hexdigest()[:16]


def group_students(enrollments: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Aggregate enrollments (each joined with its `training`) into one record
    per student, most recently enrolled first.
    """
    groups: Dict[Tuple[str, str, str], List[Dict[str, Any]]] = {}
    for enrollment in enrollments:
        groups.setdefault(contact_identity(enrollment), []).append(enrollment)

    students = []
    for identity, items in groups.items():
        items = sorted(items, key=lambda e: e.get('createdAt') or '', reverse=True)
        latest = items[0]
        student = {
            'studentId': student_id(identity),
            'studentName': latest.get('studentName'),
            'email': latest.get('email'),
            'phone': latest.get('phone'),
            'whatsappNumber': latest.get('whatsappNumber'),
            'totalEnrollments': len(items),
            'lastEnrolled': latest.get('createdAt'),
            'enrollments': [
                {
                    'enrollmentId': e.get('enrollmentId'),
                    'training': e.get('training'),
                    'status': e.get('status'),
                    'source': e.get('source'),
                    'createdAt': e.get('createdAt'),
                }
                for e in items
            ],
        }
        for status in EnrollmentStatus:
            student[status.value] = sum(1 for e in items if e.get('status') == status.value)
        students.append(student)

    return sorted(students, key=lambda s: s['lastEnrolled'] or '', reverse=True)
