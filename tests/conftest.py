"""Shared fixtures for the access log analyzer tests.

The log below is fictitious: 31 entries over 11-14 Feb 2012, with one
blank line, a few Common Log Format lines and ident/authuser variants.
"""

import pytest

from access_analyzer import LogStore

FIXTURE_LOG = (
    '00.000.000.00 - - [11/Feb/2012:15:10:46 -0500] "GET / HTTP/1.1" 200 1588 "http://localhost" "Mozilla/4.0"\n'
    '\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:46 -0500] "GET /assets/style.css HTTP/1.1" 200 2041 "http://localhost" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:46 -0500] "GET /js/jquery-1.3.2.min.js HTTP/1.1" 200 57254 "http://localhost" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/twitter.jpg HTTP/1.1" 200 2279 "http://localhost" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/contact.jpg HTTP/1.1" 200 2773 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/apic.jpg HTTP/1.1" 200 16859 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/email.jpg HTTP/1.1" 200 4679 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/anotherpic.jpg HTTP/1.1" 200 17131 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/linktosite.jpg HTTP/1.1" 200 20933 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/graphic.jpg HTTP/1.1" 200 20830 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/image.jpg HTTP/1.1" 200 20377 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/hotlink.jpg HTTP/1.1" 200 18419 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/header.jpg HTTP/1.1" 200 48980 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/topbar.jpg HTTP/1.1" 200 1610 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/blank.gif HTTP/1.1" 200 17098 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/bg.jpg HTTP/1.1" 200 25831 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/content.jpg HTTP/1.1" 200 17366 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/preview.jpg HTTP/1.1" 200 15071 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/screenshot.jpg HTTP/1.1" 200 49674 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:47 -0500] "GET /assets/temporary.jpg HTTP/1.1" 200 1458 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:48 -0500] "GET /assets/bottom.jpg HTTP/1.1" 200 55949 "http://localhost/" "Mozilla/4.0"\n'
    '00.000.000.00 - - [11/Feb/2012:15:10:48 -0500] "GET /assets/favicon.ico HTTP/1.1" 200 1150 "-" "Mozilla/4.0"\n'
    '00.00.00.01 - - [12/Feb/2012:15:48:19 -0500] "GET /robots.txt HTTP/1.0" 404 529\n'
    '000.00.0.02 - - [12/Feb/2012:16:53:37 -0500] "GET /robots.txt HTTP/1.0" 404 169\n'
    '000.00.0.02 - - [12/Feb/2012:16:53:39 -0500] "GET / HTTP/1.0" 200 3740\n'
    '000.000.000.03 craig - [12/Feb/2012:17:58:48 -0500] "GET / HTTP/1.1" 200 3740 "-" "http://localhost/anotherurl"\n'
    '00.000.000.004 - - [13/Feb/2012:18:13:02 -0500] "GET /robots.txt HTTP/1.1" 404 169 "-" "Mozilla/5.0"\n'
    '000.00.000.005 - testuser [13/Feb/2012:18:16:55 -0500] "GET /robots.txt HTTP/1.1" 404 143 "-" "Mozilla/5.0 (compatible; randombot/1.0 )"\n'
    '000.00.000.005 - testuser [13/Feb/2012:18:16:56 -0500] "GET / HTTP/1.1" 200 1588 "-" "Mozilla/5.0 (compatible; randombot/1.0 )"\n'
    '00.000.000.006 - anotherperson [14/Feb/2012:19:32:45 -0500] "GET /robots.txt HTTP/1.1" 404 143 "-" "Mozilla/5.0"\n'
    '00.000.000.07 - - [11/Feb/2012:15:11:02 -0500] "GET /test.html?order_by=name#downloads HTTP/1.1" 200 1024 "http://www.example.com/" "Mozilla/5.0"\n'
)

ENTRY_COUNT = 31


@pytest.fixture
def log_text():
    return FIXTURE_LOG


@pytest.fixture
def store():
    return LogStore.from_text(FIXTURE_LOG)
