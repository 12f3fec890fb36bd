"""
Accounts Serializers
"""
from rest_framework import serializers


class AdminLoginSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False, write_only=True)
