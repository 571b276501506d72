"""Object names, field lists and filters for PSA record queries."""

# Timecard object
TIMECARD_API_NAME = "pse__Timecard__c"

TIMECARD_FIELDS = [
    # Project and opportunity
    "pse__Project__r.pse__Opportunity__r.OpportunityNumber__c",
    "pse__Project__r.OPA_Project_Number__c",
    "pse__Project__r.pse__Start_Date__c",
    "pse__Project__r.pse__End_Date__c",
    "pse__Project__r.Name",
    # Milestone
    "pse__Milestone__r.OPA_Task_Number__c",
    "pse__Milestone__r.Name",
    # Resource
    "pse__Resource__r.Name",
    # Timecard
    "pse__Start_Date__c",
    "pse__Total_Hours__c",
    "pse__Submitted__c",
    # Daily notes
    "pse__Sunday_Notes__c",
    "pse__Monday_Notes__c",
    "pse__Tuesday_Notes__c",
    "pse__Wednesday_Notes__c",
    "pse__Thursday_Notes__c",
    "pse__Friday_Notes__c",
    "pse__Saturday_Notes__c",
]

TIMECARD_FILTER = [
    "pse__Status__c NOT IN ('Rejected')",
    "pse__Total_Hours__c != 0",
    # Non-billable milestones are prefixed 'NB'
    "(NOT pse__Milestone__r.Name LIKE 'NB%')",
]

TIMECARD_ORDER_BY = "pse__Start_Date__c"

# Project object
PROJECT_API_NAME = "pse__Proj__c"

PROJECT_FIELDS = [
    "pse__Opportunity__r.OpportunityNumber__c",
    "Name",
    "pse__Account__c",
    "pse__Account__r.Name",
    "Region_Level_2__c",
    "pse__Stage__c",
    "pse__Start_Date__c",
    "pse__End_Date__c",
    "OPA_Project_Number__c",
]

# Input validation limits
OPPORTUNITY_NUMBER_MAX_LENGTH = 50
MAX_DATE_RANGE_DAYS = 365
