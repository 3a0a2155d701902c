"""
Submission Variants

Each public form stores its records as a JSON array in its own file. A
record is a plain dict: ``id``, the variant's fields, then ``submittedAt``.
"""

REQUIRED_FIELDS = ('name', 'email')


class Variant:
    """A kind of form submission and the file it lives in"""

    def __init__(self, name, filename, optional_fields, log_tag):
        self.name = name
        self.filename = filename
        self.optional_fields = tuple(optional_fields)
        self.log_tag = log_tag

    @property
    def fields(self):
        return REQUIRED_FIELDS + self.optional_fields

    def __repr__(self):
        return f'<Variant {self.name}>'


APPLICATION = Variant('applications', 'applications.json',
                      ('platforms', 'audience', 'message'), 'APPLY')
BOOKING = Variant('bookings', 'bookings.json',
                  ('preferredTime', 'topic'), 'BOOK')

VARIANTS = {variant.name: variant for variant in (APPLICATION, BOOKING)}
