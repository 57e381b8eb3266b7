"""
Demonstration Data

Fills an empty journal with a few entries so a fresh install has something
to browse.
"""

from flask import current_app


DEMO_ENTRIES = [
    {
        'type': 'Tula',
        'title': 'Sa Umaga ng Lunes',
        'body': (
            'May amoy ng kape sa hangin,\n'
            'at ang tahimik na umaga\n'
            'ay nagbibigay ng lakas\n'
            'sa mga salitang hindi ko masabi.\n'
            '\n'
            'Hinihintay ko ang araw\n'
            'na magbibigay ng dahilan\n'
            'para ngumiti nang tunay\u2014\n'
            'hindi lang dahil kailangan.'
        ),
    },
    {
        'type': 'Pagninilay',
        'title': 'Ang Katahimikan',
        'body': (
            'Sa katahimikan ng gabi, natutunan ko na ang pinakamalalim na mga '
            'salita ay hindi nababago sa hangin \u2014 nananatili sila sa loob ng '
            'dibdib, naghihintay na marinig.'
        ),
    },
    {
        'type': 'Saloobin',
        'title': 'Mga Tanong sa Umaga',
        'body': (
            'Bakit palagi akong nagigising nang may dala-dalang mga tanong na '
            'hindi ko kayang sagutin sa maghapon? Baka ang mga tanong mismo '
            'ang sagot.'
        ),
    },
]


def seed_demo_entries(entry_store):
    """Insert the demonstration entries if the journal is empty.
    
    Args:
        entry_store: EntryStore to populate
    
    Returns:
        Number of entries inserted (0 when the journal already had entries)
    """
    if entry_store.count() != 0:
        return 0
    
    for demo in DEMO_ENTRIES:
        entry_store.create(demo['type'], demo['title'], demo['body'])
    
    current_app.logger.info('Seeded %d demo entries', len(DEMO_ENTRIES))
    return len(DEMO_ENTRIES)
