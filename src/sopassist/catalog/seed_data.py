"""ParkPoint procedure catalog seed data."""

from __future__ import annotations

from sopassist.catalog.schemas import DepartmentGroup, ProcedureDocument, ProcedureSection

# Organised by department: Human Resources, Finance, Operations,
# Audit & Compliance, Revenue Reconciliation

SOP_CATALOG = (
    # ========================================================================
    # Human Resources
    # ========================================================================
    DepartmentGroup(
        name="Human Resources",
        icon="fa-users",
        documents=(
            ProcedureDocument(
                id="SOP-HR-01",
                title="Recruitment & Onboarding",
                department="Human Resources",
                sections=(
                    ProcedureSection(
                        title="Purpose",
                        content=(
                            "To ensure that ParkPoint attracts and retains the highest quality of "
                            "talent through a structured, transparent, and fair recruitment process."
                        ),
                    ),
                    ProcedureSection(
                        title="Scope",
                        content=(
                            "Applies to all permanent, temporary, and outsourced staff recruitment "
                            "across all regions of ParkPoint operation."
                        ),
                    ),
                    ProcedureSection(
                        title="Requisition Process",
                        content=(
                            "1. Identification of Vacancy: The Department Head identifies the need "
                            "for a new role.\n"
                            "2. MRF Submission: A Manpower Requisition Form (MRF) must be completed "
                            "and signed by the Department Head and Finance.\n"
                            "3. Budget Verification: Finance confirms if the position is within the "
                            "approved annual budget."
                        ),
                    ),
                    ProcedureSection(
                        title="Sourcing & Screening",
                        content=(
                            "HR will post the job internally for 48 hours before external sourcing. "
                            "Screening involves automated resume parsing followed by a 15-minute HR "
                            "discovery call."
                        ),
                    ),
                    ProcedureSection(
                        title="Interviewing Tiers",
                        content=(
                            "Level 1: Technical Interview with Direct Supervisor.\n"
                            "Level 2: Behavioral Interview with HR Manager.\n"
                            "Level 3: Final Approval Interview with General Manager (GM)."
                        ),
                    ),
                    ProcedureSection(
                        title="Offer & Contract",
                        content=(
                            "Successful candidates will receive a Conditional Offer Letter. Upon "
                            "reference check completion, the formal Employment Contract is issued."
                        ),
                    ),
                ),
            ),
            ProcedureDocument(
                id="SOP-HR-02",
                title="Leave & Attendance Policy",
                department="Human Resources",
                sections=(
                    ProcedureSection(
                        title="Core Objectives",
                        content=(
                            "To maintain operational efficiency while ensuring employees receive "
                            "their statutory and wellness-related time off."
                        ),
                    ),
                    ProcedureSection(
                        title="Annual Leave Accrual",
                        content=(
                            "All employees accrue annual leave at a rate of 2.5 days per completed "
                            "calendar month of service, totaling 30 days per annum."
                        ),
                    ),
                    ProcedureSection(
                        title="Application Procedure",
                        content=(
                            "Leave requests must be submitted via the ERP portal at least 14 days "
                            "in advance for leave exceeding 3 days. Approval is subject to "
                            "operational requirements."
                        ),
                    ),
                    ProcedureSection(
                        title="Sick Leave",
                        content=(
                            "Medical certificates are mandatory for any sick leave exceeding 1 day. "
                            "Fraudulent claims will result in immediate disciplinary action under "
                            "SOP-HR-05."
                        ),
                    ),
                ),
            ),
        ),
    ),
    # ========================================================================
    # Finance
    # ========================================================================
    DepartmentGroup(
        name="Finance",
        icon="fa-money-bill-transfer",
        documents=(
            ProcedureDocument(
                id="SOP-FIN-01",
                title="Petty Cash Management",
                department="Finance",
                sections=(
                    ProcedureSection(
                        title="Overview",
                        content=(
                            "Controls the disbursement of small-value emergency cash payments to "
                            "avoid the administrative burden of formal procurement."
                        ),
                    ),
                    ProcedureSection(
                        title="Custodian Responsibility",
                        content=(
                            "The Finance Officer is the primary custodian. The float must be stored "
                            "in a dual-lock fireproof safe."
                        ),
                    ),
                    ProcedureSection(
                        title="Expenditure Limits",
                        content=(
                            "Maximum single transaction: BD 50.\n"
                            "Maximum monthly branch limit: BD 500.\n"
                            "Replenishment occurs when 70% of the float is exhausted."
                        ),
                    ),
                    ProcedureSection(
                        title="Prohibited Uses",
                        content=(
                            "Petty cash shall NOT be used for: 1. Salary advances, 2. Personal "
                            "loans, 3. Cashing personal checks, 4. Regular inventory procurement."
                        ),
                    ),
                ),
            ),
        ),
    ),
    # ========================================================================
    # Operations
    # ========================================================================
    DepartmentGroup(
        name="Operations",
        icon="fa-car",
        documents=(
            ProcedureDocument(
                id="SOP-OPS-01",
                title="Lost Ticket Procedure",
                department="Operations",
                sections=(
                    ProcedureSection(
                        title="Policy Statement",
                        content=(
                            "ParkPoint aims to resolve lost ticket issues fairly for the customer "
                            "while preventing revenue leakage."
                        ),
                    ),
                    ProcedureSection(
                        title="Immediate Action Plan",
                        content=(
                            "1. Request License Plate Number from the client.\n"
                            "2. Execute LPR (License Plate Recognition) search in the PMS system.\n"
                            "3. If found, charge based on actual entry time."
                        ),
                    ),
                    ProcedureSection(
                        title="Secondary Verification",
                        content=(
                            "If LPR fails: 1. Check Shift Overnight Report for entry logs.\n"
                            "2. Review CCTV if the stay is suspected to be long-term.\n"
                            "3. Request customer to verify identity via Mobile OTP registered in "
                            "ParkPoint app."
                        ),
                    ),
                    ProcedureSection(
                        title="Standard Penalty",
                        content=(
                            'If no entry proof is available, a standard "Lost Ticket Fee" '
                            "(BD 10 or daily max) is applied."
                        ),
                    ),
                ),
            ),
            ProcedureDocument(
                id="SOP-OPS-10",
                title="Valet Uniform & Grooming",
                department="Operations",
                sections=(
                    ProcedureSection(
                        title="Brand Identity",
                        content=(
                            "Uniforms are a critical touchpoint of our premium service. "
                            "Compliance is non-negotiable."
                        ),
                    ),
                    ProcedureSection(
                        title="Uniform Components",
                        content=(
                            "• Branded Polo Shirt (Tucked in)\n"
                            "• Navy Trousers (Creased)\n"
                            "• Reflective Safety Vest (Night Shift)\n"
                            "• Black Polished Shoes\n"
                            "• Branded ID Badge (Visible on chest)"
                        ),
                    ),
                    ProcedureSection(
                        title="Grooming Standards",
                        content=(
                            "Hair must be neatly trimmed. Facial hair must be well-groomed or "
                            "clean-shaven. Tattoos must be covered by sleeves where possible."
                        ),
                    ),
                ),
            ),
        ),
    ),
    # ========================================================================
    # Audit & Compliance
    # ========================================================================
    DepartmentGroup(
        name="Audit & Compliance",
        icon="fa-clipboard-check",
        documents=(
            ProcedureDocument(
                id="SOP-AUD-04",
                title="Internal Audit Controls",
                department="Audit",
                sections=(
                    ProcedureSection(
                        title="Framework",
                        content=(
                            'Establishes the "Three Lines of Defense" model for ParkPoint '
                            "corporate governance."
                        ),
                    ),
                    ProcedureSection(
                        title="Audit Cycle",
                        content=(
                            "Operational units are subject to a full audit every 90 days. "
                            "High-risk locations (Airport/Malls) are audited monthly."
                        ),
                    ),
                    ProcedureSection(
                        title="Reporting",
                        content=(
                            "Draft reports are shared with Dept Heads within 48 hours. Final "
                            "reports are submitted to the Board Audit Committee monthly."
                        ),
                    ),
                ),
            ),
        ),
    ),
    # ========================================================================
    # Revenue Reconciliation
    # ========================================================================
    DepartmentGroup(
        name="Revenue Reconciliation",
        icon="fa-chart-pie",
        documents=(
            ProcedureDocument(
                id="SOP-REV-01",
                title="Daily Revenue Matching",
                department="Revenue",
                sections=(
                    ProcedureSection(
                        title="Methodology",
                        content=(
                            "Ensures that every car processed in the system is financially "
                            "accounted for in the bank accounts."
                        ),
                    ),
                    ProcedureSection(
                        title="4-Step Verification",
                        content=(
                            "1. PMS System Totals vs Shift Close Reports.\n"
                            "2. Physical Cash Count vs Cash Collection Slips.\n"
                            "3. Credit Card/App Payments vs Gateway Provider Statements.\n"
                            "4. Total Consolidated Revenue vs Bank Deposit Slips."
                        ),
                    ),
                    ProcedureSection(
                        title="Variance Management",
                        content=(
                            "Any variance > 1.0% or BD 20 (whichever is lower) requires an "
                            "immediate Incident Report (IR) and investigation by the Audit team."
                        ),
                    ),
                ),
            ),
        ),
    ),
)
