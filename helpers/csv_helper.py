import csv
import io
from typing import Any, Dict, Iterable, Iterator, Optional

ENROLLMENT_CSV_HEADERS = [
    'Student Name', 'Email', 'Phone', 'WhatsApp', 'Training', 'Status', 'Source',
    'Notes', 'Admin Notes', 'Enrolled By', 'Created At', 'Approved At', 'Completed At'
]


def _date(value: Optional[str]) -> str:
    # ISO timestamps: keep the calendar date only
    return value[:10] if value else ''


def enrollment_row(enrollment: Dict[str, Any], admin_names: Dict[str, str]) -> list:
    training = enrollment.get('training') or {}
    enrolled_by = enrollment.get('enrolledBy')
    return [
        enrollment.get('studentName') or '',
        enrollment.get('email') or '',
        enrollment.get('phone') or '',
        enrollment.get('whatsappNumber') or '',
        training.get('title') or '',
        enrollment.get('status') or '',
        enrollment.get('source') or '',
        enrollment.get('notes') or '',
        enrollment.get('adminNotes') or '',
        admin_names.get(enrolled_by, enrolled_by or ''),
        _date(enrollment.get('createdAt')),
        _date(enrollment.get('approvedAt')),
        _date(enrollment.get('completedAt')),
    ]


def iter_enrollments_csv(enrollments: Iterable[Dict[str, Any]],
                         admin_names: Optional[Dict[str, str]] = None) -> Iterator[str]:
    """Yield the CSV export one line at a time, header first"""
    admin_names = admin_names or {}
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')

    def flush() -> str:
        line = buffer.getvalue()
        buffer.seek(0)
        buffer.truncate(0)
        return line

    writer.writerow(ENROLLMENT_CSV_HEADERS)
    yield flush()
    for enrollment in enrollments:
        writer.writerow(enrollment_row(enrollment, admin_names))
        yield flush()
