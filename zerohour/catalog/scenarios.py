"""
Declarative scenario table.

Pure data: one entry per scenario with its display metadata, a state view
for every escalation state, and six signal templates. The projection logic
in zerohour.catalog.service reads this table and never writes it; edit or
extend scenarios here without touching the service.
"""

# Trajectory labels assigned to signal templates by position, keyed by the
# index of the current escalation state.
TRAJECTORY_MAP = {
    0: ("early", "early", "early", "early", "early", "early"),
    1: ("detected", "detected", "early", "early", "early", "early"),
    2: ("alignment", "alignment", "detected", "detected", "early", "early"),
    3: ("exposure", "exposure", "alignment", "alignment", "detected", "detected"),
}

# How many days before "today" each signal template is dated, by position.
SIGNAL_DAYS_AGO = (2, 2, 1, 1, 0, 0)

# Share of the configured window that is left in each state.
COUNTDOWN_SCALING = {
    "normal": 1.0,
    "signal_convergence": 0.75,
    "exposure_window_open": 0.5,
    "escalation_imminent": 0.25,
}

# Floors applied after scaling.
COUNTDOWN_MINIMUM_MINUTES = {
    "escalation_imminent": 5,
}

# Signal categories
CYBER = "Cyber & Network Anomalies"
CORPORATE = "Corporate & Third-Party Behavior"
FINANCIAL = "Financial Stress Indicators"
OPEN_WEB = "Open-Web & Reputational Precursors"
LEGAL = "Legal & Regulatory Signals"


SCENARIOS = {
    "cyber_breach_pre_disclosure": {
        "name": "Cyber Breach Pre-Disclosure",
        "description": "Potential data breach detected before public disclosure",
        "states": {
            "normal": {
                "summary": {
                    "risk_level": "low",
                    "confidence": "high",
                    "domains": ["cyber"],
                    "summary": "No material exposure detected. Systems operating within normal parameters.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "No pending legal concerns."},
                    "cyber": {"status": "neutral", "note": "Security posture stable."},
                    "reputational": {"status": "neutral", "note": "Public sentiment unchanged."},
                    "third_party": {"status": "neutral", "note": "Vendor relationships secure."},
                },
            },
            "signal_convergence": {
                "summary": {
                    "risk_level": "elevated",
                    "confidence": "medium",
                    "domains": ["cyber", "legal"],
                    "summary": "Anomalous network activity aligning with potential intrusion indicators. "
                               "Early-stage investigation warranted.",
                },
                "domains": {
                    "legal": {"status": "forming", "note": "Breach notification requirements under review."},
                    "cyber": {"status": "active", "note": "Unusual data transfers detected; forensics initiated."},
                    "reputational": {"status": "neutral", "note": "No external visibility yet."},
                    "third_party": {"status": "neutral", "note": "Vendor access audit in progress."},
                },
            },
            "exposure_window_open": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["cyber", "legal", "reputational"],
                    "summary": "Confirmed unauthorized access to sensitive data. Disclosure window is open "
                               "and regulatory notification is imminent.",
                },
                "domains": {
                    "legal": {"status": "active", "note": "Regulatory notification timeline triggered."},
                    "cyber": {"status": "active", "note": "Containment in progress; exfiltration confirmed."},
                    "reputational": {"status": "forming",
                                     "note": "Media inquiries beginning; statement preparation underway."},
                    "third_party": {"status": "forming", "note": "Partner notification protocols activated."},
                },
            },
            "escalation_imminent": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["cyber", "legal", "reputational", "third_party"],
                    "summary": "Full breach exposure imminent. All stakeholders require immediate "
                               "notification. Crisis protocol activated.",
                },
                "domains": {
                    "legal": {"status": "active", "note": "Regulatory filings in progress; litigation risk elevated."},
                    "cyber": {"status": "active", "note": "Active incident response; systems quarantined."},
                    "reputational": {"status": "active", "note": "Public disclosure required within hours."},
                    "third_party": {"status": "active", "note": "Customer and partner notifications underway."},
                },
            },
        },
        "signals": [
            {"category": CYBER, "title": "Anomalous Traffic Pattern Detected",
             "description": "Network activity indicators are beginning to diverge from established baseline "
                            "behavior across multiple vectors."},
            {"category": CORPORATE, "title": "Behavioral Shift Across Dependent Entities",
             "description": "Multiple third-party entities are exhibiting subtle but correlated changes in "
                            "activity over a short time window."},
            {"category": CYBER, "title": "Persistent Network Irregularities Observed",
             "description": "Repeated low-level anomalies suggest emerging consistency rather than isolated "
                            "or transient noise."},
            {"category": CYBER, "title": "Cross-System Signal Alignment Identified",
             "description": "Independent network signals that typically fluctuate separately are showing "
                            "early signs of alignment."},
            {"category": FINANCIAL, "title": "Unusual Data Transfer Volumes",
             "description": "Outbound data volumes exceeding normal thresholds during non-business hours."},
            {"category": CYBER, "title": "Authentication Pattern Deviation",
             "description": "Login attempts from unexpected geographic regions showing coordinated timing."},
        ],
    },

    "weaponized_public_narrative": {
        "name": "Weaponized Public Narrative",
        "description": "Coordinated disinformation campaign targeting organization",
        "states": {
            "normal": {
                "summary": {
                    "risk_level": "low",
                    "confidence": "high",
                    "domains": ["reputational"],
                    "summary": "No material exposure detected. Media landscape stable.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "No defamation concerns identified."},
                    "cyber": {"status": "neutral", "note": "No coordinated bot activity detected."},
                    "reputational": {"status": "neutral", "note": "Brand sentiment positive."},
                    "third_party": {"status": "neutral", "note": "Partner relationships stable."},
                },
            },
            "signal_convergence": {
                "summary": {
                    "risk_level": "elevated",
                    "confidence": "medium",
                    "domains": ["reputational", "cyber"],
                    "summary": "Coordinated narrative forming across social platforms. "
                               "Bot amplification patterns detected.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "Monitoring for actionable defamation."},
                    "cyber": {"status": "forming", "note": "Inauthentic account clusters identified."},
                    "reputational": {"status": "active", "note": "Negative hashtag gaining traction."},
                    "third_party": {"status": "neutral", "note": "No partner impact yet."},
                },
            },
            "exposure_window_open": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["reputational", "legal", "third_party"],
                    "summary": "Narrative has reached mainstream media. Counter-messaging window closing rapidly.",
                },
                "domains": {
                    "legal": {"status": "forming", "note": "Cease and desist options under review."},
                    "cyber": {"status": "active", "note": "Amplification network mapped; origin traced."},
                    "reputational": {"status": "active",
                                     "note": "Major outlets covering story; crisis comms active."},
                    "third_party": {"status": "forming", "note": "Partner distancing signals detected."},
                },
            },
            "escalation_imminent": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["reputational", "legal", "third_party", "cyber"],
                    "summary": "Narrative fully weaponized. Executive visibility required. "
                               "Stakeholder trust at critical threshold.",
                },
                "domains": {
                    "legal": {"status": "active",
                              "note": "Congressional inquiry possible; legal strategy engaged."},
                    "cyber": {"status": "active", "note": "Persistent campaign; counter-operations considered."},
                    "reputational": {"status": "active",
                                     "note": "CEO statement required; stock impact expected."},
                    "third_party": {"status": "active", "note": "Major partner review triggered."},
                },
            },
        },
        "signals": [
            {"category": OPEN_WEB, "title": "Coordinated Narrative Formation Detected",
             "description": "Multiple independent sources beginning to echo similar themes across social "
                            "platforms."},
            {"category": OPEN_WEB, "title": "Amplification Network Identified",
             "description": "Bot activity patterns suggest coordinated amplification of specific narrative "
                            "threads."},
            {"category": OPEN_WEB, "title": "Sentiment Shift Acceleration",
             "description": "Rate of negative sentiment increase exceeds organic growth patterns."},
            {"category": FINANCIAL, "title": "Market Positioning Anomaly",
             "description": "Unusual options activity detected in correlated securities."},
            {"category": OPEN_WEB, "title": "Influencer Engagement Spike",
             "description": "Key opinion leaders showing sudden interest in previously dormant topics."},
            {"category": LEGAL, "title": "Media Inquiry Clustering",
             "description": "Multiple journalist inquiries arriving within compressed timeframe."},
        ],
    },

    "legal_escalation_pre_filing": {
        "name": "Legal Escalation Pre-Filing",
        "description": "Material litigation risk before formal filing",
        "states": {
            "normal": {
                "summary": {
                    "risk_level": "low",
                    "confidence": "high",
                    "domains": ["legal"],
                    "summary": "No material exposure detected. Legal landscape clear.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "Routine contract matters only."},
                    "cyber": {"status": "neutral", "note": "No discovery-related concerns."},
                    "reputational": {"status": "neutral", "note": "No litigation publicity risk."},
                    "third_party": {"status": "neutral", "note": "No counter-party disputes."},
                },
            },
            "signal_convergence": {
                "summary": {
                    "risk_level": "elevated",
                    "confidence": "medium",
                    "domains": ["legal", "reputational"],
                    "summary": "Pre-filing legal indicators aligning with reputational signals. "
                               "Plaintiff counsel activity detected.",
                },
                "domains": {
                    "legal": {"status": "active",
                              "note": "Demand letter received; class action investigation noted."},
                    "cyber": {"status": "neutral", "note": "Document preservation notice issued."},
                    "reputational": {"status": "forming", "note": "Plaintiff-side media outreach beginning."},
                    "third_party": {"status": "neutral", "note": "Contract review initiated."},
                },
            },
            "exposure_window_open": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["legal", "reputational", "third_party"],
                    "summary": "Near-term legal escalation likely prior to public filing. "
                               "Settlement window narrowing.",
                },
                "domains": {
                    "legal": {"status": "active",
                              "note": "Filing expected within days; settlement discussions stalled."},
                    "cyber": {"status": "forming", "note": "E-discovery scope expanding."},
                    "reputational": {"status": "active",
                                     "note": "Pre-filing media strategy detected from plaintiff."},
                    "third_party": {"status": "forming",
                                    "note": "Insurance carrier notified; partner indemnity review."},
                },
            },
            "escalation_imminent": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["legal", "reputational", "third_party", "cyber"],
                    "summary": "Litigation filing imminent. Full legal defense activation required. "
                               "Board notification triggered.",
                },
                "domains": {
                    "legal": {"status": "active",
                              "note": "Complaint imminent; parallel regulatory exposure possible."},
                    "cyber": {"status": "active", "note": "Forensic hold expanded; privileged review underway."},
                    "reputational": {"status": "active", "note": "Public filing will trigger news cycle."},
                    "third_party": {"status": "active", "note": "Counter-claims and indemnification in play."},
                },
            },
        },
        "signals": [
            {"category": LEGAL, "title": "Pre-Filing Activity Indicators",
             "description": "Legal counsel activity patterns suggest preparation for formal proceedings."},
            {"category": LEGAL, "title": "Settlement Window Narrowing",
             "description": "Communication patterns indicate diminishing opportunity for pre-litigation "
                            "resolution."},
            {"category": OPEN_WEB, "title": "Plaintiff-Side Media Outreach",
             "description": "Early indicators of coordinated media strategy from opposing counsel."},
            {"category": LEGAL, "title": "Regulatory Interest Signals",
             "description": "Inquiry patterns from regulatory bodies showing increased attention."},
            {"category": CORPORATE, "title": "Witness Coordination Activity",
             "description": "Communication patterns suggesting preparation of third-party testimonials."},
            {"category": LEGAL, "title": "Document Preservation Notices",
             "description": "Legal hold requests indicating imminent formal action."},
        ],
    },

    "third_party_exposure_event": {
        "name": "Third Party Exposure Event",
        "description": "Critical vendor or partner failure creating exposure",
        "states": {
            "normal": {
                "summary": {
                    "risk_level": "low",
                    "confidence": "high",
                    "domains": ["third_party"],
                    "summary": "No material exposure detected. Vendor ecosystem healthy.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "Contract compliance verified."},
                    "cyber": {"status": "neutral", "note": "Vendor security assessments current."},
                    "reputational": {"status": "neutral", "note": "No partner-related publicity risk."},
                    "third_party": {"status": "neutral", "note": "All critical vendors stable."},
                },
            },
            "signal_convergence": {
                "summary": {
                    "risk_level": "elevated",
                    "confidence": "medium",
                    "domains": ["third_party", "cyber"],
                    "summary": "Critical vendor showing distress signals. Contingency evaluation initiated.",
                },
                "domains": {
                    "legal": {"status": "neutral", "note": "Contract termination clauses under review."},
                    "cyber": {"status": "forming", "note": "Vendor access audit triggered."},
                    "reputational": {"status": "neutral", "note": "No public visibility of vendor issues."},
                    "third_party": {"status": "active",
                                    "note": "Key personnel departures at vendor; financial distress indicators."},
                },
            },
            "exposure_window_open": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["third_party", "cyber", "reputational"],
                    "summary": "Vendor failure confirmed. Service transition required. Customer impact possible.",
                },
                "domains": {
                    "legal": {"status": "forming", "note": "Breach of contract claim being evaluated."},
                    "cyber": {"status": "active",
                              "note": "Data retrieval urgent; access termination in progress."},
                    "reputational": {"status": "forming", "note": "Customer communication drafts prepared."},
                    "third_party": {"status": "active", "note": "Emergency vendor onboarding initiated."},
                },
            },
            "escalation_imminent": {
                "summary": {
                    "risk_level": "high",
                    "confidence": "high",
                    "domains": ["third_party", "cyber", "reputational", "legal"],
                    "summary": "Vendor collapse imminent. Business continuity at risk. All domains activated.",
                },
                "domains": {
                    "legal": {"status": "active",
                              "note": "Vendor bankruptcy expected; asset recovery in motion."},
                    "cyber": {"status": "active", "note": "Data migration critical; system cutover underway."},
                    "reputational": {"status": "active",
                                     "note": "Customer notification required; SLA breach communications."},
                    "third_party": {"status": "active", "note": "Full service transition deadline imminent."},
                },
            },
        },
        "signals": [
            {"category": CORPORATE, "title": "Vendor Distress Signals Emerging",
             "description": "Key personnel movements and financial indicators suggest vendor stability "
                            "concerns."},
            {"category": CORPORATE, "title": "Supply Chain Dependency Alert",
             "description": "Critical vendor showing signs of operational disruption affecting delivery "
                            "commitments."},
            {"category": FINANCIAL, "title": "Credit Risk Elevation",
             "description": "Third-party credit metrics deteriorating beyond seasonal variance."},
            {"category": CORPORATE, "title": "Unusual Third-Party Activity Detected",
             "description": "Behavioral indicators across external partners are deviating from historical "
                            "norms in a coordinated pattern."},
            {"category": CYBER, "title": "Vendor System Access Irregularity",
             "description": "Access patterns from vendor-connected systems showing anomalous behavior."},
            {"category": FINANCIAL, "title": "Payment Pattern Disruption",
             "description": "Vendor payment timing deviating from established schedules."},
        ],
    },
}
