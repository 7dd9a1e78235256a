"""Hospital departments subscribed to admission and billing events."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from lib.tariff import DEFAULT_TARIFF, Tariff

from .messages import admissions_notice, billing_notice, nursing_notice, pharmacy_notice
from .notifications import NotificationBroadcaster

def register_default_departments(
    broadcaster: NotificationBroadcaster,
    out: Optional[TextIO] = None,
    *,
    tariff: Tariff = DEFAULT_TARIFF,
) -> NotificationBroadcaster:
    """Admissions + Nursing on admit, Billing + Pharmacy on bill, in that order."""
    stream = out if out is not None else sys.stdout
    symbol = tariff.currency_symbol

    broadcaster.subscribe_admission(lambda p: print(admissions_notice(p), file=stream))
    broadcaster.subscribe_admission(lambda p: print(nursing_notice(p), file=stream))
    broadcaster.subscribe_bill(lambda p, amount: print(billing_notice(p, amount, symbol), file=stream))
    broadcaster.subscribe_bill(lambda p, amount: print(pharmacy_notice(p), file=stream))
    return broadcaster
