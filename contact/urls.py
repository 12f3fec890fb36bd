"""
Contact Enquiry URL Configuration
"""
from django.urls import path
from .views import EnquirySubmitView, EnquiryListView, EnquiryDetailView

app_name = 'contact'

urlpatterns = [
    path('send-enquiry', EnquirySubmitView.as_view(), name='submit'),
    path('enquiries', EnquiryListView.as_view(), name='list'),
    path('enquiries/<uuid:id>', EnquiryDetailView.as_view(), name='detail'),
]
