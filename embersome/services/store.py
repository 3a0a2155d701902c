"""
Record Store

Flat-file persistence for form submissions. Each variant is a single JSON
array on disk that is rewritten whole on every change.
"""

import json
import logging
import os
import secrets
import tempfile
import threading
from datetime import datetime, timedelta, timezone

from embersome.models import VARIANTS, Variant

logger = logging.getLogger(__name__)

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def _utcnow():
    return datetime.now(timezone.utc)


def isoformat_utc(moment):
    """Format a datetime like ``2026-10-19T08:15:02.123Z``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _base36(number):
    out = ''
    while True:
        number, rem = divmod(number, 36)
        out = _BASE36[rem] + out
        if not number:
            return out


class RecordStore:
    """Append, list, delete and count submissions of each variant.

    Mutations of a file are serialised by a per-file lock and land on disk
    through a temporary file plus an atomic rename, so concurrent requests
    cannot lose each other's writes and a crash never leaves half a file.
    """

    def __init__(self, app=None, data_dir=None, clock=_utcnow):
        self.data_dir = data_dir
        self.clock = clock
        self._locks = {}
        self._locks_guard = threading.Lock()
        if data_dir:
            os.makedirs(data_dir, exist_ok=True)
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.data_dir = app.config['DATA_DIR']
        os.makedirs(self.data_dir, exist_ok=True)
        app.extensions['record_store'] = self

    # -- helpers ---------------------------------------------------------

    @staticmethod
    def _resolve(variant):
        if isinstance(variant, Variant):
            return variant
        try:
            return VARIANTS[variant]
        except KeyError:
            raise ValueError(f'Unknown submission variant: {variant!r}') from None

    def _path(self, variant):
        return os.path.join(self.data_dir, variant.filename)

    def _lock(self, variant):
        with self._locks_guard:
            return self._locks.setdefault(variant.filename, threading.Lock())

    def _load(self, variant):
        """Read a variant's file as stored; a missing or corrupt file reads as empty.

        Entries that are not objects are kept so a rewrite never drops them.
        """
        path = self._path(variant)
        if not os.path.exists(path):
            return []
        try:
            with open(path, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning('Could not read %s, treating it as empty: %s', path, e)
            return []
        if not isinstance(data, list):
            logger.warning('%s does not hold a JSON array, treating it as empty', path)
            return []
        skipped = sum(1 for record in data if not isinstance(record, dict))
        if skipped:
            logger.warning('%s holds %d entries that are not records; they are kept but not listed',
                           path, skipped)
        return data

    def _save(self, variant, records):
        path = self._path(variant)
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f'.{variant.filename}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(records, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _new_id(self, records, now):
        taken = {record.get('id') for record in records if isinstance(record, dict)}
        stamp = _base36(int(now.timestamp() * 1000))
        while True:
            record_id = f'sub_{stamp}{secrets.token_hex(4)}'
            if record_id not in taken:
                return record_id

    # -- operations ------------------------------------------------------

    def append(self, variant, fields):
        """Store a validated submission and return the stored record."""
        variant = self._resolve(variant)
        with self._lock(variant):
            records = self._load(variant)
            now = self.clock()
            # Generated keys always win over anything the caller passed in
            record = {'id': self._new_id(records, now)}
            record.update((key, value) for key, value in fields.items()
                          if key not in ('id', 'submittedAt'))
            record['submittedAt'] = isoformat_utc(now)
            records.append(record)
            self._save(variant, records)
        return dict(record)

    def list_records(self, variant):
        """All records of a variant, most recent first."""
        variant = self._resolve(variant)
        records = [record for record in self._load(variant) if isinstance(record, dict)]
        # reversed() first so records sharing a timestamp keep newest-first order
        return sorted(reversed(records),
                      key=lambda record: str(record.get('submittedAt') or ''),
                      reverse=True)

    def delete(self, variant, record_id):
        """Remove the record with ``record_id``; returns whether one was removed."""
        variant = self._resolve(variant)
        with self._lock(variant):
            records = self._load(variant)
            remaining = [record for record in records
                         if not (isinstance(record, dict) and record.get('id') == record_id)]
            if len(remaining) == len(records):
                return False
            self._save(variant, remaining)
        return True

    def summary(self):
        """Dashboard counts: total, today and trailing seven days per variant."""
        now = self.clock()
        today = isoformat_utc(now)[:10]
        week_ago = isoformat_utc(now - timedelta(days=7))

        counts = {}
        for variant in VARIANTS.values():
            records = self._load(variant)
            stamps = [record['submittedAt'] for record in records
                      if isinstance(record, dict) and isinstance(record.get('submittedAt'), str)]
            counts[variant.name] = {
                'total': len(records),
                'today': sum(1 for stamp in stamps if stamp.startswith(today)),
                'thisWeek': sum(1 for stamp in stamps if stamp >= week_ago),
            }
        counts['totalRequests'] = sum(counts[name]['total'] for name in VARIANTS)
        return counts
